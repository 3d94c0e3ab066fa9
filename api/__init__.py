"""API module for the School Records reporting service."""
from .routes import grades_router, teachers_router
from .schemas import (
    GradesListResponse,
    GroupedGradesResponse,
    GradeResponse,
    GradebookResponse,
    ErrorResponse,
)

__all__ = [
    "grades_router",
    "teachers_router",
    "GradesListResponse",
    "GroupedGradesResponse",
    "GradeResponse",
    "GradebookResponse",
    "ErrorResponse",
]
