"""
API routes for the School Records reporting service.
"""
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from database import get_db
from reports import (
    group_grades_by_subject,
    total_grade_count,
    get_teacher_gradebook,
    list_grades,
    get_grade,
    InvalidArgument,
    NotFound,
    Unavailable,
)
from .schemas import (
    GradesListResponse,
    GroupedGradesResponse,
    GradeResponse,
    GradebookResponse,
    ErrorResponse,
)


# Router for grade reports
grades_router = APIRouter(prefix="/grades", tags=["Grades"])

# Router for teacher views
teachers_router = APIRouter(prefix="/teachers", tags=["Teachers"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid identifier or parameter"},
    503: {"model": ErrorResponse, "description": "Database unavailable"},
}

GROUP_BY_VALUES = ("subject",)


def _gradebook_response(teacher_id: str, db: Session) -> GradebookResponse:
    try:
        data = get_teacher_gradebook(db, teacher_id)
        return GradebookResponse(count=len(data), data=data)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Unavailable as e:
        raise HTTPException(status_code=503, detail=e.message)


# ============== Grade Endpoints ==============

@grades_router.get(
    "",
    response_model=Union[GroupedGradesResponse, GradesListResponse],
    responses=ERROR_RESPONSES,
)
async def get_grades(
    group_by: Optional[str] = Query(None, alias="groupBy", description="Grouping mode. Allowed: subject"),
    student: Optional[str] = Query(None, description="Filter by student ID (flat list only)"),
    class_id: Optional[str] = Query(None, alias="class", description="Filter by class ID"),
    subject: Optional[str] = Query(None, description="Filter by subject ID (flat list only)"),
    trimester: Optional[str] = Query(None, description="Filter by trimester ID"),
    db: Session = Depends(get_db)
):
    """
    Get grades with optional filters.

    With `groupBy=subject`, grades are grouped by subject for academic
    reports; student and subject filters are ignored in that mode.
    """
    if group_by is not None and group_by not in GROUP_BY_VALUES:
        raise HTTPException(
            status_code=400,
            detail="Invalid groupBy value. Allowed: subject"
        )

    try:
        if group_by == "subject":
            groups = group_grades_by_subject(db, class_id=class_id, trimester_id=trimester)
            return GroupedGradesResponse(
                count=len(groups),
                total_grades=total_grade_count(groups),
                data=groups
            )

        grades = list_grades(
            db,
            student_id=student,
            class_id=class_id,
            subject_id=subject,
            trimester_id=trimester
        )
        return GradesListResponse(count=len(grades), data=grades)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Unavailable as e:
        raise HTTPException(status_code=503, detail=e.message)


@grades_router.get(
    "/teachers/{teacher_id}/students-grades",
    response_model=GradebookResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "Teacher not found"}},
)
async def get_students_grades_by_teacher(teacher_id: str, db: Session = Depends(get_db)):
    """
    Get all students taught by a teacher with the grades that teacher issued.
    """
    return _gradebook_response(teacher_id, db)


@grades_router.get(
    "/{grade_id}",
    response_model=GradeResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "Grade not found"}},
)
async def get_grade_by_id(grade_id: str, db: Session = Depends(get_db)):
    """Get a single grade with its references resolved."""
    try:
        return GradeResponse(data=get_grade(db, grade_id))
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Unavailable as e:
        raise HTTPException(status_code=503, detail=e.message)


# ============== Teacher Endpoints ==============

@teachers_router.get(
    "/{teacher_id}/students-grades",
    response_model=GradebookResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "Teacher not found"}},
)
async def get_teacher_students_grades(teacher_id: str, db: Session = Depends(get_db)):
    """Same gradebook as /grades/teachers/{teacher_id}/students-grades."""
    return _gradebook_response(teacher_id, db)
