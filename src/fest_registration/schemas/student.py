"""Pydantic schemas for student registration endpoints."""

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class StudentCreate(BaseModel):
    """Request body for registering a student.

    Every field is optional here so that a missing value is reported with the
    service's own 400 response instead of a schema error. Blank checks happen in
    the service layer.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    roll_number: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    event: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Any:
        if isinstance(value, (bool, int, float)):
            # false/0 count as missing, like any other falsy value
            return str(value) if value else None
        return value

    @field_validator("name", "roll_number", "phone", "event")
    @classmethod
    def _strip(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().lower() if value is not None else None


class StudentRead(BaseModel):
    """Student response payload."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: UUID = Field(..., alias="_id")
    name: str
    roll_number: str
    email: str
    phone: str
    event: str
    created_at: datetime
    updated_at: datetime


class StudentListResponse(BaseModel):
    """Envelope returned by the list endpoint."""

    success: bool = True
    count: int = Field(..., ge=0)
    data: List[StudentRead]


class StudentResponse(BaseModel):
    """Envelope returned after a create or delete."""

    success: bool = True
    message: str
    data: StudentRead


class ErrorResponse(BaseModel):
    """Shape of every failed request."""

    success: bool = False
    message: str
    error: Optional[str] = None
