"""Pydantic models for request/response validation."""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .domain.entities import Employee, Position


class PositionCreate(BaseModel):
    """Request model for creating or replacing a position."""

    name: str = Field(..., min_length=1, max_length=255, description="Position title")
    salary: Decimal = Field(..., description="Exact salary amount")

    def to_entity(self) -> Position:
        return Position(name=self.name, salary=self.salary)


class PositionResponse(BaseModel):
    """Position response model."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "3f1c2d9e-8b0a-4c57-9d3e-2a6f1b7c4e10",
                "name": "lead",
                "salary": "2000",
            }
        },
    )

    id: UUID
    name: str
    salary: Decimal


class EmployeeCreate(BaseModel):
    """Request model for creating or replacing an employee."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    position_id: UUID = Field(..., description="Identifier of the held position")

    def to_entity(self) -> Employee:
        return Employee(
            first_name=self.first_name,
            last_name=self.last_name,
            position_id=self.position_id,
        )


class EmployeeResponse(BaseModel):
    """Employee response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    position_id: UUID


class CreatedResponse(BaseModel):
    """Identifier of a newly created record."""

    id: str


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    error: str
    message: str
    correlation_id: Optional[str] = None
