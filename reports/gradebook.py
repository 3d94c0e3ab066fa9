"""
Teacher gradebook.

For a teacher: every student enrolled in the classes the teacher owns,
each with the grades that teacher issued them (any subject, any
trimester). Students without grades are kept with an empty list.
"""
import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from database import Teacher
from .exceptions import NotFound
from .repository import SchoolRepository
from .resolver import ReferenceResolver
from .schemas import ClassRef, ResolvedGrade, StudentGradebook, StudentSummary
from .statistics import compute_statistics
from .validation import validate_id

logger = logging.getLogger(__name__)


def get_teacher_gradebook(db: Session, teacher_id: str) -> List[StudentGradebook]:
    """
    Get all students taught by a teacher with the grades they issued.

    Output is ordered by class name, then by student last name and first
    name (case-insensitive), then by student id. Each student's grades
    are newest first.

    Args:
        db: Database session
        teacher_id: ID of the teacher

    Returns:
        One StudentGradebook per enrolled student

    Raises:
        InvalidArgument: If teacher_id is malformed
        NotFound: If the teacher does not exist
        Unavailable: If the database fails
    """
    validate_id(teacher_id, "teacher_id")

    repository = SchoolRepository(db)
    if not repository.teacher_exists(teacher_id):
        raise NotFound(repository.entity_name(Teacher), teacher_id)

    classes = sorted(
        repository.get_classes_by_teacher(teacher_id),
        key=lambda c: (c.name.casefold(), c.id)
    )
    if not classes:
        logger.debug("Teacher %s owns no class", teacher_id)
        return []

    roster = []
    for school_class in classes:
        students = sorted(
            repository.get_students_by_class(school_class.id),
            key=lambda s: (s.last_name.casefold(), s.first_name.casefold(), s.id)
        )
        roster.extend((school_class, student) for student in students)

    # Only grades issued by this teacher, for the enrolled students
    grades = repository.get_grades_by_filter(
        teacher_id=teacher_id,
        student_ids=[student.id for _, student in roster]
    )
    resolved = ReferenceResolver(repository).resolve(grades)

    grades_by_student: Dict[str, List[ResolvedGrade]] = {}
    for grade in resolved:
        grades_by_student.setdefault(grade.student_id, []).append(grade)

    gradebook = []
    for school_class, student in roster:
        student_grades = grades_by_student.get(student.id, [])
        gradebook.append(
            StudentGradebook(
                student=StudentSummary(
                    id=student.id,
                    last_name=student.last_name,
                    first_name=student.first_name,
                    birth_date=student.birth_date,
                ),
                class_ref=ClassRef(id=school_class.id, name=school_class.name),
                grades=student_grades,
                statistics=compute_statistics(student_grades),
            )
        )

    logger.debug(
        "Gradebook for teacher %s: %d classes, %d students, %d grades",
        teacher_id, len(classes), len(roster), len(resolved)
    )
    return gradebook

