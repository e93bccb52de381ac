"""
Unit section extraction for training manuals.

A manual is one markdown document whose units are introduced by headings of
the form ``# UNIT <major>.<minor>: <title>``. Headings are not indexed up front
and may appear out of numeric order, so the end of a unit is the earliest
occurrence of any other heading inside the configured numbering range.
"""

from typing import Optional

from backoffice.models.unit import DEFAULT_UNIT_TITLE, ExtractedSection

UNIT_MARKER_TEMPLATE = '# UNIT {major}.{minor}:'


def heading_marker(major: int, minor: int) -> str:
    """Return the literal marker that opens unit ``major.minor``."""
    return UNIT_MARKER_TEMPLATE.format(major=major, minor=minor)


def find_section_end(
    document: str,
    major: int,
    minor: int,
    search_start: int,
    max_major: int,
    max_minor: int,
    min_major: Optional[int] = None,
) -> int:
    """
    Find where the section opened by ``major.minor`` stops.

    Every ``(i, j)`` pair with ``i`` in ``min_major..max_major`` and ``j`` in
    ``1..max_minor`` is searched for, and the smallest offset wins. The returned
    offset points at the ``#`` of the next heading, so the newline before it
    stays with the current section.

    Args:
        document: Full manual text
        major: Major number of the current section
        minor: Minor number of the current section
        search_start: Offset just past the current heading marker
        max_major: Highest major number to look for
        max_minor: Highest minor number to look for
        min_major: Lowest major number to look for, defaults to ``major``

    Returns:
        Offset of the next heading, or ``len(document)`` if none follows
    """
    end = len(document)
    first_major = major if min_major is None else min_major

    for i in range(first_major, max_major + 1):
        for j in range(1, max_minor + 1):
            if i == major and j == minor:
                continue
            # Leading newline keeps the current heading from matching itself
            found = document.find('\n' + heading_marker(i, j), search_start)
            if found != -1 and found + 1 < end:
                end = found + 1

    return end


def extract_section(
    document: str,
    major: int,
    minor: int,
    max_major: int,
    max_minor: int,
    min_major: Optional[int] = None,
) -> Optional[ExtractedSection]:
    """
    Extract unit ``major.minor`` from a manual.

    Args:
        document: Full manual text
        major: Module number of the requested unit
        minor: Unit number within the module
        max_major: Highest module number that can follow the unit
        max_minor: Highest unit number per module
        min_major: Lowest module number searched for the next heading

    Returns:
        The section title and body, or None when the heading is absent
    """
    marker = heading_marker(major, minor)
    start = document.find(marker)
    if start == -1:
        return None

    end = find_section_end(
        document,
        major,
        minor,
        search_start=start + len(marker),
        max_major=max_major,
        max_minor=max_minor,
        min_major=min_major,
    )

    body = document[start:end]
    first_line = body.split('\n', 1)[0]
    title = first_line.replace(marker, '', 1).strip()

    return ExtractedSection(title=title or DEFAULT_UNIT_TITLE, body=body)
