"""Primary API router definition."""

from fastapi import APIRouter

from . import students

api_router = APIRouter()

api_router.include_router(students.router)
