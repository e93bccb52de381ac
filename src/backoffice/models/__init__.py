"""
Service Models Package

Pydantic models used throughout the service: request validation models,
response models and the training manual domain records.
"""

from .input import GetUnitRequest, ListUnitsRequest
from .output import GetUnitOutput, HealthCheckOutput, ListUnitsOutput, UnitSummary
from .unit import (
    Activity,
    ContentSection,
    ExtractedSection,
    HeadingBlock,
    ListBlock,
    ModuleDocument,
    ParagraphBlock,
    TrainingUnit,
)

__all__ = [
    # Input models
    "GetUnitRequest",
    "ListUnitsRequest",

    # Output models
    "GetUnitOutput",
    "ListUnitsOutput",
    "UnitSummary",
    "HealthCheckOutput",

    # Domain models
    "Activity",
    "ContentSection",
    "ExtractedSection",
    "HeadingBlock",
    "ListBlock",
    "ModuleDocument",
    "ParagraphBlock",
    "TrainingUnit",
]
