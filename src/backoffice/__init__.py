"""
Back-office Training Service Module.

Serverless handlers that serve a restaurant's training manual as structured
units:

- handlers: API handlers and entry points
- logic: manual segmentation and parsing
- dal: document loading from a directory or S3
- models: request, response and domain models
"""

__version__ = "1.0.0"
__description__ = "Training manual handlers for restaurant back-office operations"

from backoffice.handlers.utils.observability import logger, metrics, tracer
from backoffice.logic.section_extractor import extract_section
from backoffice.models.unit import ExtractedSection, TrainingUnit

__all__ = [
    "ExtractedSection",
    "TrainingUnit",
    "extract_section",
    "logger",
    "tracer",
    "metrics",
]
