"""
Business Logic Layer Module.

Pure parsing of training manuals (section extraction, unit structure,
markdown blocks, workbook reflection questions) plus the service that ties
them to a manual store.
"""

from backoffice.logic.markdown_content import parse_markdown_content
from backoffice.logic.reflection import parse_reflection_questions
from backoffice.logic.section_extractor import extract_section, heading_marker
from backoffice.logic.unit_parser import parse_unit

__all__ = [
    "extract_section",
    "heading_marker",
    "parse_markdown_content",
    "parse_reflection_questions",
    "parse_unit",
]
