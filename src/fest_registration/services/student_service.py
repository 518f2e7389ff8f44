"""Domain logic for student registrations."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Student
from ..schemas import StudentCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "roll_number", "email", "phone", "event")


class StudentRuleViolation(Exception):
    """Raised when a registration request cannot be honoured."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class StudentValidationError(StudentRuleViolation):
    def __init__(self, missing: Sequence[str] = ()) -> None:
        super().__init__("All fields are required")
        self.missing = tuple(missing)


class DuplicateRollNumber(StudentRuleViolation):
    def __init__(self, roll_number: str) -> None:
        super().__init__("Student with this roll number already exists")
        self.roll_number = roll_number


class StudentNotFound(StudentRuleViolation):
    def __init__(self, student_id: UUID) -> None:
        super().__init__("Student not found", status_code=404)
        self.student_id = student_id


class InvalidStudentId(StudentRuleViolation):
    def __init__(self, raw_id: str) -> None:
        super().__init__("Invalid student ID")
        self.raw_id = raw_id


class StoreUnavailable(StudentRuleViolation):
    """The record store failed for a reason unrelated to the request."""

    def __init__(self, error: str) -> None:
        super().__init__(error, status_code=500)


def parse_student_id(raw_id: Union[str, UUID]) -> UUID:
    """Return ``raw_id`` as a UUID or raise :class:`InvalidStudentId`."""

    if isinstance(raw_id, UUID):
        return raw_id
    try:
        return UUID(str(raw_id))
    except ValueError as exc:
        raise InvalidStudentId(str(raw_id)) from exc


def validate_payload(payload: StudentCreate) -> None:
    """Reject payloads with a missing or blank required field."""

    missing = [field for field in REQUIRED_FIELDS if not getattr(payload, field)]
    if missing:
        raise StudentValidationError(missing)


def list_students(session: Session) -> Sequence[Student]:
    """Return all students, newest registration first.

    Records sharing a ``created_at`` value are ordered by descending id, so the
    order is stable across calls but not insertion order within one clock tick.
    """

    stmt = select(Student).order_by(Student.created_at.desc(), Student.id.desc())
    try:
        return session.execute(stmt).scalars().all()
    except SQLAlchemyError as exc:
        logger.exception("failed to list students")
        raise StoreUnavailable(str(exc)) from exc


def find_by_roll_number(session: Session, roll_number: str) -> Optional[Student]:
    stmt = select(Student).where(Student.roll_number == roll_number)
    try:
        return session.execute(stmt).scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.exception("roll number lookup failed")
        raise StoreUnavailable(str(exc)) from exc


def create_student(session: Session, payload: StudentCreate) -> Student:
    """Insert a new student ensuring the roll number is unique.

    The lookup is only a fast path; the unique constraint on ``roll_number``
    decides, so a concurrent insert that slips past the lookup still surfaces
    as :class:`DuplicateRollNumber`.
    """

    validate_payload(payload)

    if find_by_roll_number(session, payload.roll_number) is not None:
        raise DuplicateRollNumber(payload.roll_number)

    student = Student(
        name=payload.name,
        roll_number=payload.roll_number,
        email=payload.email,
        phone=payload.phone,
        event=payload.event,
    )
    session.add(student)
    try:
        session.flush()  # Assign id and timestamps, and hit the unique constraint now
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateRollNumber(payload.roll_number) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("failed to insert student %s", payload.roll_number)
        raise StoreUnavailable(str(exc)) from exc

    session.refresh(student)
    return student


def delete_student(session: Session, student_id: Union[str, UUID]) -> Student:
    """Delete a student by identifier and return the removed record."""

    key = parse_student_id(student_id)
    try:
        student = session.get(Student, key)
        if student is None:
            raise StudentNotFound(key)
        session.delete(student)
        session.flush()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("failed to delete student %s", key)
        raise StoreUnavailable(str(exc)) from exc
    return student
