"""
Training manual domain models.

This module defines the records produced when a training manual is sliced
into units: the raw extracted section, the structured content blocks and the
fully parsed training unit.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_UNIT_TITLE = 'Training Unit'


class ExtractedSection(BaseModel):
    """A manual section located by its ``# UNIT <major>.<minor>:`` heading."""

    model_config = ConfigDict(frozen=True)

    title: Annotated[str, Field(
        description='Heading text with the marker prefix stripped',
        examples=['Welcome to Jayna Gyro']
    )]

    body: Annotated[str, Field(
        description='Section text from its heading up to the next heading'
    )]


class ParagraphBlock(BaseModel):
    type: Literal['paragraph'] = 'paragraph'
    content: str


class HeadingBlock(BaseModel):
    """A bold ``**Label:** detail`` line."""

    type: Literal['heading'] = 'heading'
    content: str
    detail: str = ''


class ListBlock(BaseModel):
    type: Literal['list'] = 'list'
    items: List[str] = Field(default_factory=list)


ContentBlock = Annotated[
    Union[ParagraphBlock, HeadingBlock, ListBlock],
    Field(discriminator='type'),
]


class ContentSection(BaseModel):
    heading: str
    content: List[ContentBlock] = Field(default_factory=list)


class Activity(BaseModel):
    title: str
    content: List[ContentBlock] = Field(default_factory=list)


class TrainingUnit(BaseModel):
    """Structured view of one unit of a training module."""

    module_number: Annotated[int, Field(
        ge=1,
        description='Module the unit belongs to',
        examples=[1]
    )]

    unit_number: Annotated[int, Field(
        ge=1,
        description='Unit number within the module',
        examples=[2]
    )]

    title: Annotated[str, Field(
        description='Unit title taken from its heading'
    )] = DEFAULT_UNIT_TITLE

    duration: Annotated[str, Field(
        description='Value of the **Duration:** line'
    )] = 'varies'

    trainer: Annotated[str, Field(
        description='Value of the **Trainer:** line or the configured default'
    )]

    location: Annotated[str, Field(
        description='Value of the **Location:** line'
    )] = ''

    purpose: Annotated[str, Field(
        description='Text of the "## Purpose" section'
    )] = ''

    content_sections: List[ContentSection] = Field(default_factory=list)

    activities: List[Activity] = Field(default_factory=list)

    reflection: Annotated[List[str], Field(
        default_factory=list,
        description='Reflection questions from the module workbook'
    )]

    full_markdown: Annotated[str, Field(
        description='Raw markdown of the unit, heading line included'
    )]


class ModuleDocument(BaseModel):
    """A module or workbook markdown file loaded from a manual store."""

    number: Annotated[int, Field(ge=1)]
    filename: str
    content: str
