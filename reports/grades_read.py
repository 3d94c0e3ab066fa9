"""
Flat grade listing.
Implements the ungrouped read operations with resolved references.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from database import Grade
from .repository import SchoolRepository
from .resolver import ReferenceResolver
from .schemas import GradeDetail, ResolvedGrade
from .validation import validate_id, validate_optional_id


def list_grades(
    db: Session,
    student_id: Optional[str] = None,
    class_id: Optional[str] = None,
    subject_id: Optional[str] = None,
    trimester_id: Optional[str] = None
) -> List[ResolvedGrade]:
    """
    Get grades with optional filters, newest first.

    Args:
        db: Database session
        student_id: Filter by student (optional)
        class_id: Filter by class (optional)
        subject_id: Filter by subject (optional)
        trimester_id: Filter by trimester (optional)

    Returns:
        Resolved grades

    Raises:
        InvalidArgument: If a filter id is malformed
    """
    validate_optional_id(student_id, "student_id")
    validate_optional_id(class_id, "class_id")
    validate_optional_id(subject_id, "subject_id")
    validate_optional_id(trimester_id, "trimester_id")

    repository = SchoolRepository(db)
    grades = repository.get_grades_by_filter(
        class_id=class_id,
        trimester_id=trimester_id,
        student_id=student_id,
        subject_id=subject_id
    )
    return ReferenceResolver(repository).resolve(grades)


def get_grade(db: Session, grade_id: str) -> GradeDetail:
    """
    Get a single grade with resolved references, including the student's
    birth date and the trimester date.

    Raises:
        InvalidArgument: If grade_id is malformed
        NotFound: If the grade does not exist
    """
    validate_id(grade_id, "grade_id")

    repository = SchoolRepository(db)
    grade = repository.get_by_id(Grade, grade_id)
    return ReferenceResolver(repository).resolve_detail(grade)
