"""SQLAlchemy models for the registration service."""

from .student import Student

__all__ = [
    "Student",
]
