"""
Input models for request validation using Pydantic.

Request bodies and path parameters are validated here before any document
is loaded.
"""

from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator


def _reject_boolean(v: Any) -> Any:
    # bool is an int subclass, so lax mode would read true as 1
    if isinstance(v, bool):
        raise ValueError('must be an integer, not a boolean')
    return v


class GetUnitRequest(BaseModel):
    """Request model for fetching one training unit."""

    module_number: Annotated[int, Field(
        description='Training module number',
        examples=[1, 3]
    )]

    unit_number: Annotated[int, Field(
        description='Unit number within the module',
        examples=[1, 4]
    )]

    @field_validator('module_number', 'unit_number', mode='before')
    @classmethod
    def validate_not_boolean(cls, v: Any) -> Any:
        return _reject_boolean(v)

    @field_validator('module_number', 'unit_number')
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that module and unit numbers are positive."""
        # We don't use Field(gt=0) because pydantic exports it incorrectly to OpenAPI doc
        if v <= 0:
            raise ValueError('must be greater than 0')
        return v


class ListUnitsRequest(BaseModel):
    """Request model for listing the units of a module."""

    module_number: Annotated[int, Field(
        description='Training module number',
        examples=[2]
    )]

    @field_validator('module_number', mode='before')
    @classmethod
    def validate_not_boolean(cls, v: Any) -> Any:
        return _reject_boolean(v)

    @field_validator('module_number')
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('must be greater than 0')
        return v
