"""
Structured parsing of a training unit.

A unit section is sliced out of its module with the section extractor and
then broken down into metadata, purpose, content sections and activities.
"""

from typing import Dict, List, Optional, Tuple

from backoffice.logic.markdown_content import parse_markdown_content
from backoffice.logic.section_extractor import extract_section
from backoffice.models.unit import Activity, ContentSection, TrainingUnit

# Metadata lines are only looked for near the heading
METADATA_LINE_LIMIT = 10
METADATA_LABELS = {
    'duration': '**Duration:**',
    'trainer': '**Trainer:**',
    'location': '**Location:**',
}

PURPOSE_HEADING = '## Purpose'
SUBSECTION_PREFIX = '### '
ACTIVITY_PREFIX = 'activity'


def parse_metadata(lines: List[str]) -> Dict[str, str]:
    """Read Duration, Trainer and Location values from the first lines of a unit."""
    metadata = {key: '' for key in METADATA_LABELS}
    for line in lines[:METADATA_LINE_LIMIT]:
        for key, label in METADATA_LABELS.items():
            if label in line:
                metadata[key] = line.split(label)[1].strip()
    return metadata


def parse_purpose(section: str) -> str:
    """Return the text under ``## Purpose``, empty when no heading follows it."""
    start = section.find(PURPOSE_HEADING)
    if start == -1:
        return ''

    text_start = start + len(PURPOSE_HEADING)
    end = section.find('\n##', text_start)
    if end == -1:
        return ''
    return section[text_start:end].strip()


def _activity_title(heading: str) -> str:
    _, colon, rest = heading.partition(':')
    return rest.strip() if colon else heading


def parse_subsections(lines: List[str]) -> Tuple[List[ContentSection], List[Activity]]:
    """
    Split ``### `` subsections into content sections and activities.

    A subsection runs until the next line starting with ``###`` or ``## ``.
    Headings beginning with "Activity" become activities named after the text
    following their first colon.
    """
    content_sections: List[ContentSection] = []
    activities: List[Activity] = []

    for index, line in enumerate(lines):
        if not line.startswith(SUBSECTION_PREFIX):
            continue

        heading = line[len(SUBSECTION_PREFIX):].strip()

        body_lines = []
        for following in lines[index + 1:]:
            if following.startswith('###') or following.startswith('## '):
                break
            body_lines.append(following)

        blocks = parse_markdown_content('\n'.join(body_lines).strip())

        if heading.lower().startswith(ACTIVITY_PREFIX):
            activities.append(Activity(title=_activity_title(heading), content=blocks))
        else:
            content_sections.append(ContentSection(heading=heading, content=blocks))

    return content_sections, activities


def parse_unit(
    document: str,
    module_number: int,
    unit_number: int,
    max_module: int,
    max_unit: int,
    default_trainer: str,
) -> Optional[TrainingUnit]:
    """
    Parse unit ``module_number.unit_number`` out of a module document.

    Args:
        document: Module markdown
        module_number: Requested module
        unit_number: Requested unit within the module
        max_module: Highest module number used to bound the unit
        max_unit: Highest unit number used to bound the unit
        default_trainer: Trainer reported when the unit names none

    Returns:
        The parsed unit, or None when its heading is not in the document
    """
    section = extract_section(document, module_number, unit_number, max_module, max_unit)
    if section is None:
        return None

    lines = section.body.split('\n')
    metadata = parse_metadata(lines)
    content_sections, activities = parse_subsections(lines)

    return TrainingUnit(
        module_number=module_number,
        unit_number=unit_number,
        title=section.title,
        duration=metadata['duration'] or 'varies',
        trainer=metadata['trainer'] or default_trainer,
        location=metadata['location'],
        purpose=parse_purpose(section.body),
        content_sections=content_sections,
        activities=activities,
        full_markdown=section.body,
    )
