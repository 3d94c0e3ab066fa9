"""
Subject-grouped grade report.

Ordering rules:
- grades inside a group: student last name, then first name
  (case-insensitive), then grade id; grades whose student cannot be
  resolved come after the others, ordered by student id then grade id.
- groups: subject name (case-insensitive), then subject id; groups whose
  subject cannot be resolved come last, ordered by subject id.
"""
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from sqlalchemy.orm import Session

from .repository import SchoolRepository
from .resolver import ReferenceResolver
from .schemas import ResolvedGrade, SubjectGroup, is_resolved
from .statistics import compute_statistics
from .validation import validate_optional_id

logger = logging.getLogger(__name__)


def student_sort_key(grade: ResolvedGrade) -> tuple:
    """Sort key placing grades in student surname order."""
    student = grade.student
    if is_resolved(student):
        return (0, student.last_name.casefold(), student.first_name.casefold(), grade.id)
    return (1, student.id, "", grade.id)


def subject_sort_key(group: SubjectGroup) -> tuple:
    """Sort key placing groups in subject name order."""
    subject = group.subject
    if is_resolved(subject):
        return (0, subject.name.casefold(), subject.id)
    return (1, subject.id, "")


def group_by_subject(grades: Iterable[ResolvedGrade]) -> List[SubjectGroup]:
    """
    Partition resolved grades by subject id.

    Each group keeps the subject snapshot of the first grade seen for
    that subject. Every input grade lands in exactly one group.
    """
    buckets: Dict[str, List[ResolvedGrade]] = {}
    for grade in grades:
        buckets.setdefault(grade.subject_id, []).append(grade)

    groups = []
    for subject_grades in buckets.values():
        subject_grades.sort(key=student_sort_key)
        groups.append(
            SubjectGroup(
                subject=subject_grades[0].subject,
                grades=subject_grades,
                statistics=compute_statistics(subject_grades),
            )
        )

    groups.sort(key=subject_sort_key)
    return groups


def total_grade_count(groups: Sequence[SubjectGroup]) -> int:
    """Number of grades across all groups."""
    return sum(len(group.grades) for group in groups)


def group_grades_by_subject(
    db: Session,
    class_id: Optional[str] = None,
    trimester_id: Optional[str] = None
) -> List[SubjectGroup]:
    """
    Get grades grouped by subject, for academic reports.

    Args:
        db: Database session
        class_id: Filter by class (optional)
        trimester_id: Filter by trimester (optional)

    Returns:
        Subject groups; an empty list when no grade matches

    Raises:
        InvalidArgument: If a filter id is malformed
        Unavailable: If the database fails
    """
    validate_optional_id(class_id, "class_id")
    validate_optional_id(trimester_id, "trimester_id")

    repository = SchoolRepository(db)
    grades = repository.get_grades_by_filter(class_id=class_id, trimester_id=trimester_id)
    resolved = ReferenceResolver(repository).resolve(grades)
    groups = group_by_subject(resolved)

    logger.debug(
        "Grouped %d grades into %d subjects (class=%s, trimester=%s)",
        len(resolved), len(groups), class_id, trimester_id
    )
    return groups
