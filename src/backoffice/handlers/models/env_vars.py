"""
Environment variable models for type-safe configuration.

This module defines Pydantic models for environment variables used by the
training handlers, validated once per cold start through aws-lambda-env-modeler.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field


class TrainingHandlerEnvVars(BaseModel):
    """Environment variables for the training content handlers."""

    # Local directory holding MODULE_<n>_*.md files
    TRAINING_MODULES_DIR: Annotated[str, Field(
        description='Directory containing training module markdown files',
        min_length=1
    )] = 'training/modules'

    # When set, modules are read from S3 instead of the local directory
    TRAINING_BUCKET_NAME: Annotated[Optional[str], Field(
        description='S3 bucket containing training module markdown files'
    )] = None

    TRAINING_KEY_PREFIX: Annotated[str, Field(
        description='Key prefix of the training module objects in S3'
    )] = 'training/modules/'

    # Heading enumeration bounds, "# UNIT <module>.<unit>:"
    MAX_MODULE_NUMBER: Annotated[int, Field(
        description='Highest module number searched when locating unit boundaries',
        ge=1,
        le=99
    )] = 5

    MAX_UNIT_NUMBER: Annotated[int, Field(
        description='Highest unit number per module searched when locating unit boundaries',
        ge=1,
        le=99
    )] = 6

    DEFAULT_TRAINER: Annotated[str, Field(
        description='Trainer name used when a unit does not declare one'
    )] = 'Demetri'

    ENVIRONMENT: Annotated[str, Field(
        description='Deployment environment name',
        pattern=r'^(dev|test|staging|prod)$'
    )] = 'dev'

    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'backoffice-training'

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        description='CORS allowed origins for API responses'
    )] = '*'

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == 'prod'

    @property
    def uses_s3(self) -> bool:
        """Check if training documents are served from S3."""
        return bool(self.TRAINING_BUCKET_NAME)


def get_handler_env_vars() -> TrainingHandlerEnvVars:
    """
    Get typed environment variables for the training handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=TrainingHandlerEnvVars)
