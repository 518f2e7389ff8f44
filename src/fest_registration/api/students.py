"""Student registration endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..schemas import ErrorResponse, StudentCreate, StudentListResponse, StudentRead, StudentResponse
from ..services import student_service
from ..services.student_service import DuplicateRollNumber, StoreUnavailable, StudentRuleViolation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["students"])

_EXAMPLE_STUDENT = {
    "_id": "5f0c7a8e-9d6b-4b8e-a1a2-3c4d5e6f7a8b",
    "name": "Asha Verma",
    "rollNumber": "21CS042",
    "email": "asha.verma@example.edu",
    "phone": "9876543210",
    "event": "Dance",
    "createdAt": "2026-02-14T10:15:30.120000",
    "updatedAt": "2026-02-14T10:15:30.120000",
}


def _to_http_error(exc: StudentRuleViolation, failure_message: str) -> HTTPException:
    if isinstance(exc, StoreUnavailable):
        return HTTPException(
            status_code=exc.status_code,
            detail={"message": failure_message, "error": exc.detail},
        )
    return HTTPException(status_code=exc.status_code, detail=exc.detail)


@router.get(
    "",
    response_model=StudentListResponse,
    summary="List registered students",
    responses={
        200: {
            "description": "All registrations, newest first",
            "content": {
                "application/json": {
                    "example": {"success": True, "count": 1, "data": [_EXAMPLE_STUDENT]}
                }
            },
        },
        500: {"model": ErrorResponse, "description": "Record store failure"},
    },
)
def list_students(db: Session = Depends(get_db)) -> StudentListResponse:
    """Return every registration ordered by creation time, newest first."""

    try:
        students = student_service.list_students(db)
    except StudentRuleViolation as exc:
        raise _to_http_error(exc, "Error fetching students") from exc
    data = [StudentRead.model_validate(student) for student in students]
    return StudentListResponse(count=len(data), data=data)


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a student",
    responses={
        201: {
            "description": "Student registered",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "Student registered successfully!",
                        "data": _EXAMPLE_STUDENT,
                    }
                }
            },
        },
        400: {"model": ErrorResponse, "description": "Missing field or duplicate roll number"},
        500: {"model": ErrorResponse, "description": "Record store failure"},
    },
)
def create_student(
    payload: StudentCreate,
    db: Session = Depends(get_db),
) -> StudentResponse:
    """Register a student for an event.

    Example request body::

        {
            "name": "Asha Verma",
            "rollNumber": "21CS042",
            "email": "Asha.Verma@example.edu",
            "phone": "9876543210",
            "event": "Dance"
        }
    """

    try:
        student = student_service.create_student(db, payload)
        db.commit()
        db.refresh(student)
    except StudentRuleViolation as exc:
        db.rollback()
        raise _to_http_error(exc, "Error registering student") from exc
    except IntegrityError as exc:
        db.rollback()
        raise _to_http_error(DuplicateRollNumber(payload.roll_number), "Error registering student") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("failed to commit registration")
        raise _to_http_error(StoreUnavailable(str(exc)), "Error registering student") from exc

    logger.info("registered student %s for %s", student.roll_number, student.event)
    return StudentResponse(
        message="Student registered successfully!",
        data=StudentRead.model_validate(student),
    )


@router.delete(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Remove a registration",
    responses={
        200: {
            "description": "Student removed",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "Student deleted successfully!",
                        "data": _EXAMPLE_STUDENT,
                    }
                }
            },
        },
        400: {"model": ErrorResponse, "description": "Malformed student id"},
        404: {"model": ErrorResponse, "description": "Student not found"},
        500: {"model": ErrorResponse, "description": "Record store failure"},
    },
)
def delete_student(student_id: str, db: Session = Depends(get_db)) -> StudentResponse:
    """Delete a registration and return the removed record."""

    try:
        student = student_service.delete_student(db, student_id)
        # the instance is detached once the delete is committed
        data = StudentRead.model_validate(student)
        db.commit()
    except StudentRuleViolation as exc:
        db.rollback()
        raise _to_http_error(exc, "Error deleting student") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("failed to commit deletion")
        raise _to_http_error(StoreUnavailable(str(exc)), "Error deleting student") from exc

    logger.info("deleted student %s", data.roll_number)
    return StudentResponse(message="Student deleted successfully!", data=data)
