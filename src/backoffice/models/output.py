"""
Output models for API responses using Pydantic.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field

from backoffice.models.unit import TrainingUnit


class GetUnitOutput(BaseModel):
    """Response model for a training unit lookup."""

    success: bool = True
    unit: TrainingUnit


class UnitSummary(BaseModel):
    unit_number: Annotated[int, Field(ge=1, examples=[1])]
    title: Annotated[str, Field(examples=['Welcome to the Team'])]


class ListUnitsOutput(BaseModel):
    """Response model for the units of one module."""

    success: bool = True

    module_number: Annotated[int, Field(
        description='Module the units belong to',
        examples=[1]
    )]

    units: List[UnitSummary] = Field(default_factory=list)


class HealthCheckOutput(BaseModel):
    """Response model for health check endpoint."""

    status: Annotated[str, Field(
        description='Overall health status',
        examples=['healthy', 'degraded', 'unhealthy']
    )]

    timestamp: datetime

    environment: Annotated[str, Field(examples=['dev', 'prod'])]

    checks: Dict[str, Any] = Field(default_factory=dict)

    details: Optional[Dict[str, Any]] = None
