"""
Back-office Lambda Handlers Module.

Entry points of the serverless application. Each handler follows the
three-layer layout:

1. Handler Layer (this module): request/response handling, validation, routing
2. Logic Layer: training manual parsing
3. Data Access Layer: loading manual documents from disk or S3

The handlers use AWS Lambda Powertools for structured logging with
correlation IDs, X-Ray tracing and CloudWatch metrics.
"""

from backoffice.handlers.utils.observability import logger, metrics, tracer
from backoffice.handlers.utils.rest_api_resolver import TRAINING_UNIT_PATH, app

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "app",
    "TRAINING_UNIT_PATH",
]
