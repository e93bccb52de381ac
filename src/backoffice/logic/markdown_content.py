"""
Conversion of training markdown fragments into renderable content blocks.
"""

from typing import List, Optional

from backoffice.models.unit import ContentBlock, HeadingBlock, ListBlock, ParagraphBlock

BOLD_PREFIX = '**'
BOLD_LABEL_END = ':**'
LIST_PREFIXES = ('- ', '* ')


def parse_bold_label(line: str) -> Optional[HeadingBlock]:
    """Parse a ``**Label:** detail`` line, or return None for any other line."""
    if not line.startswith(BOLD_PREFIX) or BOLD_LABEL_END not in line:
        return None

    colon = line.index(BOLD_LABEL_END)
    return HeadingBlock(
        content=line[len(BOLD_PREFIX):colon].strip(),
        detail=line[colon + len(BOLD_LABEL_END):].strip(),
    )


def parse_markdown_content(content: str) -> List[ContentBlock]:
    """
    Split a markdown fragment into paragraph, heading and list blocks.

    Consecutive text lines are joined into one paragraph, ``- ``/``* `` lines
    are gathered into one list until a blank line or bold label closes it.
    """
    blocks: List[ContentBlock] = []
    paragraph = ''
    current_list: Optional[ListBlock] = None

    def flush_paragraph() -> None:
        nonlocal paragraph
        if paragraph:
            blocks.append(ParagraphBlock(content=paragraph))
            paragraph = ''

    def flush_list() -> None:
        nonlocal current_list
        if current_list is not None:
            blocks.append(current_list)
            current_list = None

    for raw_line in content.split('\n'):
        line = raw_line.strip()

        if not line:
            flush_paragraph()
            flush_list()
            continue

        heading = parse_bold_label(line)
        if heading is not None:
            flush_paragraph()
            flush_list()
            blocks.append(heading)
            continue

        if line.startswith(LIST_PREFIXES):
            flush_paragraph()
            if current_list is None:
                current_list = ListBlock()
            current_list.items.append(line[2:].strip())
            continue

        paragraph = f'{paragraph} {line}' if paragraph else line

    flush_paragraph()
    flush_list()

    return blocks
