"""
Reflection question parsing for module workbooks.

Workbooks reuse the ``# UNIT <module>.<unit>:`` headings of their module and
list numbered questions as bold labels, e.g. ``**1. What surprised you?:**``.
"""

from typing import List

from backoffice.logic.section_extractor import heading_marker


def _workbook_block(workbook: str, module_number: int, unit_number: int) -> str:
    marker = heading_marker(module_number, unit_number)
    start = workbook.find(marker)
    if start == -1:
        return ''

    search_start = start + len(marker)
    end = workbook.find('\n# UNIT', search_start)
    if end == -1:
        end = workbook.find('\n---', search_start)
    if end == -1:
        end = len(workbook)
    return workbook[start:end]


def parse_question(line: str) -> str:
    """Return the question text of a ``**N. Question:**`` line, or an empty string."""
    line = line.strip()
    if not line.startswith('**') or ':**' not in line:
        return ''

    text = line[2:line.rindex(':**')]
    _, dot, question = text.partition('. ')
    if not dot:
        return ''
    return question.strip()


def parse_reflection_questions(workbook: str, module_number: int, unit_number: int) -> List[str]:
    """List the reflection questions a workbook holds for one unit."""
    if not workbook:
        return []

    block = _workbook_block(workbook, module_number, unit_number)
    questions = []
    for line in block.split('\n'):
        question = parse_question(line)
        if question:
            questions.append(question)
    return questions
