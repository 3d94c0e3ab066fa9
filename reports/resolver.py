"""
Reference resolution for grade records.

Turns raw Grade rows into ResolvedGrade objects carrying snapshots of the
subject, teacher, student, class and trimester they reference. Lookups
are batched: one query per entity type for the whole grade list.
"""
import logging
from typing import Dict, List, Sequence

from database import Grade, SchoolClass, Student, Subject, Teacher, Trimester
from .repository import SchoolRepository
from .schemas import (
    ClassRef,
    GradeDetail,
    PersonRef,
    ResolvedGrade,
    StudentDetailRef,
    SubjectRef,
    TrimesterDetailRef,
    TrimesterRef,
    UnresolvedReference,
)

logger = logging.getLogger(__name__)


def _subject_ref(subject: Subject) -> SubjectRef:
    return SubjectRef(id=subject.id, name=subject.name)


def _class_ref(school_class: SchoolClass) -> ClassRef:
    return ClassRef(id=school_class.id, name=school_class.name)


def _trimester_ref(trimester: Trimester) -> TrimesterRef:
    return TrimesterRef(id=trimester.id, name=trimester.name)


def _person_ref(person) -> PersonRef:
    return PersonRef(id=person.id, last_name=person.last_name, first_name=person.first_name)


def _student_detail_ref(student: Student) -> StudentDetailRef:
    return StudentDetailRef(
        id=student.id,
        last_name=student.last_name,
        first_name=student.first_name,
        birth_date=student.birth_date,
    )


def _trimester_detail_ref(trimester: Trimester) -> TrimesterDetailRef:
    return TrimesterDetailRef(id=trimester.id, name=trimester.name, date=trimester.date)


class ReferenceResolver:
    """
    Resolves the foreign references of grades against the repository.

    A dangling id does not fail the batch: the affected snapshot becomes
    an UnresolvedReference and the rest of the grade is kept.
    """

    # (Grade attribute, ResolvedGrade field, model, snapshot builder)
    REFERENCES = (
        ("subject_id", "subject", Subject, _subject_ref),
        ("teacher_id", "teacher", Teacher, _person_ref),
        ("student_id", "student", Student, _person_ref),
        ("class_id", "class_ref", SchoolClass, _class_ref),
        ("trimester_id", "trimester", Trimester, _trimester_ref),
    )

    # Richer snapshots used by resolve_detail
    DETAIL_BUILDERS = {
        "student": _student_detail_ref,
        "trimester": _trimester_detail_ref,
    }

    def __init__(self, repository: SchoolRepository):
        self.repository = repository

    def resolve(self, grades: Sequence[Grade]) -> List[ResolvedGrade]:
        """
        Resolve every reference of every grade.

        Args:
            grades: Grade rows

        Returns:
            ResolvedGrade list in the same order as the input
        """
        if not grades:
            return []

        lookups = self._lookup(grades)
        return [self._resolve_one(grade, lookups) for grade in grades]

    def resolve_detail(self, grade: Grade) -> GradeDetail:
        """
        Resolve a single grade, adding the student's birth date and the
        trimester date to their snapshots.
        """
        return self._resolve_one(grade, self._lookup([grade]), detailed=True)

    def _lookup(self, grades: Sequence[Grade]) -> Dict[str, Dict[str, object]]:
        lookups: Dict[str, Dict[str, object]] = {}
        for attribute, _, model, _ in self.REFERENCES:
            ids = {getattr(grade, attribute) for grade in grades}
            lookups[attribute] = self.repository.get_many(model, ids)
        return lookups

    def _resolve_one(self, grade: Grade, lookups: Dict[str, Dict[str, object]], detailed: bool = False):
        snapshots = {}
        for attribute, field, model, build in self.REFERENCES:
            ref_id = getattr(grade, attribute)
            entity = lookups[attribute].get(ref_id)
            if entity is None:
                entity_name = self.repository.entity_name(model)
                logger.warning(
                    "Grade %s references missing %s %s", grade.id, entity_name, ref_id
                )
                snapshots[field] = UnresolvedReference(entity=entity_name, id=ref_id)
            else:
                if detailed:
                    build = self.DETAIL_BUILDERS.get(field, build)
                snapshots[field] = build(entity)

        model_class = GradeDetail if detailed else ResolvedGrade
        return model_class(
            id=grade.id,
            student_id=grade.student_id,
            class_id=grade.class_id,
            subject_id=grade.subject_id,
            teacher_id=grade.teacher_id,
            trimester_id=grade.trimester_id,
            score=grade.score,
            coefficient=grade.coefficient,
            created_at=grade.created_at,
            **snapshots
        )
