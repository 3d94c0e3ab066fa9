"""
Entity lookups used by the reporting engine.

SchoolRepository wraps a SQLAlchemy session and exposes the typed
queries the resolver, the grouping engine and the gradebook assembler
need. Storage failures are surfaced as Unavailable and never retried.
"""
import logging
from functools import wraps
from typing import Dict, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import Grade, SchoolClass, Student, Subject, Teacher, Trimester
from .exceptions import NotFound, Unavailable

logger = logging.getLogger(__name__)

ENTITY_NAMES = {
    Grade: "Grade",
    SchoolClass: "Class",
    Student: "Student",
    Subject: "Subject",
    Teacher: "Teacher",
    Trimester: "Trimester",
}


def _storage_call(method):
    """Translate SQLAlchemy failures into Unavailable."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            logger.error("Repository call %s failed: %s", method.__name__, exc)
            raise Unavailable(f"Storage error during {method.__name__}") from exc
    return wrapper


class SchoolRepository:
    """
    Read-only repository over the school records tables.
    """

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def entity_name(model) -> str:
        """Display name of a model, e.g. "Class" for SchoolClass."""
        return ENTITY_NAMES.get(model, model.__name__)

    @_storage_call
    def get_by_id(self, model, entity_id: str):
        """
        Get one entity by id.

        Raises:
            NotFound: If no row has this id
        """
        entity = self.db.query(model).filter(model.id == entity_id).first()
        if entity is None:
            raise NotFound(self.entity_name(model), entity_id)
        return entity

    @_storage_call
    def get_many(self, model, ids: Iterable[str]) -> Dict[str, object]:
        """
        Batch lookup: one IN query for all distinct ids.

        Returns:
            Mapping of id to entity; ids with no row are absent
        """
        wanted = set(ids)
        if not wanted:
            return {}
        rows = self.db.query(model).filter(model.id.in_(wanted)).all()
        return {row.id: row for row in rows}

    @_storage_call
    def teacher_exists(self, teacher_id: str) -> bool:
        return self.db.query(Teacher.id).filter(Teacher.id == teacher_id).first() is not None

    @_storage_call
    def get_classes_by_teacher(self, teacher_id: str) -> List[SchoolClass]:
        return self.db.query(SchoolClass).filter(SchoolClass.teacher_id == teacher_id).all()

    @_storage_call
    def get_students_by_class(self, class_id: str) -> List[Student]:
        return self.db.query(Student).filter(Student.class_id == class_id).all()

    @_storage_call
    def get_grades_by_filter(
        self,
        class_id: Optional[str] = None,
        trimester_id: Optional[str] = None,
        student_id: Optional[str] = None,
        subject_id: Optional[str] = None,
        teacher_id: Optional[str] = None,
        student_ids: Optional[Iterable[str]] = None
    ) -> List[Grade]:
        """
        Get grades matching every provided filter.
        An absent filter places no restriction on that column.

        Returns:
            Grades, newest first
        """
        query = self.db.query(Grade)

        if class_id is not None:
            query = query.filter(Grade.class_id == class_id)

        if trimester_id is not None:
            query = query.filter(Grade.trimester_id == trimester_id)

        if student_id is not None:
            query = query.filter(Grade.student_id == student_id)

        if subject_id is not None:
            query = query.filter(Grade.subject_id == subject_id)

        if teacher_id is not None:
            query = query.filter(Grade.teacher_id == teacher_id)

        if student_ids is not None:
            student_ids = set(student_ids)
            if not student_ids:
                return []
            query = query.filter(Grade.student_id.in_(student_ids))

        return query.order_by(Grade.created_at.desc(), Grade.id).all()
