"""Service layer exports."""

from . import student_service

__all__ = [
    "student_service",
]
