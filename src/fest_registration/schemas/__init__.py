"""Public schema exports."""

from .student import (
    ErrorResponse,
    StudentCreate,
    StudentListResponse,
    StudentRead,
    StudentResponse,
)

__all__ = [
    "ErrorResponse",
    "StudentCreate",
    "StudentListResponse",
    "StudentRead",
    "StudentResponse",
]
