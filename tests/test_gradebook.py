"""
Tests for the teacher gradebook.
"""
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from reports import (
    get_teacher_gradebook,
    InvalidArgument,
    NotFound,
    Unavailable,
    UnresolvedReference,
)


class TestTeacherGradebook:
    """Tests for get_teacher_gradebook."""

    def test_roster_in_surname_order_with_gradeless_student(self, db, factory, school):
        """Teacher grades Durand only: both students listed, Durand first."""
        grade = factory.grade(school["durand"], school["maths"], school["teacher"], school["t1"], score=14)

        gradebook = get_teacher_gradebook(db, school["teacher"].id)

        assert [entry.student.last_name for entry in gradebook] == ["Durand", "Martin"]
        assert [g.id for g in gradebook[0].grades] == [grade.id]
        assert gradebook[1].grades == []
        assert gradebook[1].statistics.total_grades == 0
        assert gradebook[1].statistics.weighted_average is None

    def test_no_grades_yields_one_entry_per_student(self, db, school):
        gradebook = get_teacher_gradebook(db, school["teacher"].id)

        assert len(gradebook) == 2
        assert all(entry.grades == [] for entry in gradebook)

    def test_teacher_without_class(self, db, factory, school):
        """A teacher owning no class gets an empty gradebook, not an error."""
        substitute = factory.teacher("Garnier", "Sophie")
        assert get_teacher_gradebook(db, substitute.id) == []

    def test_unknown_teacher(self, db, school):
        with pytest.raises(NotFound) as exc_info:
            get_teacher_gradebook(db, "a" * 24)
        assert exc_info.value.entity == "Teacher"

    def test_malformed_teacher_id(self, db):
        with pytest.raises(InvalidArgument):
            get_teacher_gradebook(db, "teacher-1")

    def test_teacher_id_with_trailing_newline(self, db, school):
        """An otherwise valid id followed by a newline is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            get_teacher_gradebook(db, school["teacher"].id + "\n")
        assert exc_info.value.field == "teacher_id"

    def test_other_teachers_grades_excluded(self, db, factory, school):
        """Only grades issued by the requested teacher appear."""
        history_teacher = factory.teacher("Moreau", "Julien")
        own = factory.grade(school["martin"], school["maths"], school["teacher"], school["t1"])
        factory.grade(school["martin"], school["french"], history_teacher, school["t1"])

        gradebook = get_teacher_gradebook(db, school["teacher"].id)
        martin = next(entry for entry in gradebook if entry.student.last_name == "Martin")

        assert [g.id for g in martin.grades] == [own.id]
        assert martin.grades[0].subject.name == "Mathématiques"

    def test_grades_across_subjects_and_trimesters(self, db, factory, school):
        t2 = factory.trimester("T2")
        factory.grade(school["durand"], school["maths"], school["teacher"], school["t1"], score=10, coefficient=1)
        factory.grade(school["durand"], school["french"], school["teacher"], t2, score=16, coefficient=2)

        durand = get_teacher_gradebook(db, school["teacher"].id)[0]

        assert len(durand.grades) == 2
        assert {g.trimester.name for g in durand.grades} == {"T1", "T2"}
        assert durand.statistics.weighted_average == 14.0

    def test_ordered_by_class_then_surname(self, db, factory, school):
        """Classes in name order, students in surname order within class."""
        earlier = factory.school_class("CE2-B", school["teacher"])
        factory.student("Roux", "Nathan", earlier)
        factory.student("Bernard", "Hugo", earlier)

        gradebook = get_teacher_gradebook(db, school["teacher"].id)

        assert [(e.class_ref.name, e.student.last_name) for e in gradebook] == [
            ("CE2-B", "Bernard"),
            ("CE2-B", "Roux"),
            ("CM1-A", "Durand"),
            ("CM1-A", "Martin"),
        ]

    def test_other_classes_not_included(self, db, factory, school):
        colleague = factory.teacher("Moreau", "Julien")
        colleague_class = factory.school_class("CM2-B", colleague)
        factory.student("Petit", "Chloé", colleague_class)

        names = [e.student.last_name for e in get_teacher_gradebook(db, school["teacher"].id)]
        assert names == ["Durand", "Martin"]

    def test_student_summary_fields(self, db, school):
        entry = get_teacher_gradebook(db, school["teacher"].id)[0]

        assert entry.student.id == school["durand"].id
        assert entry.student.first_name == "Emma"
        assert entry.student.birth_date == school["durand"].birth_date
        assert entry.class_ref.id == school["class"].id

    def test_deleted_subject_degrades_one_grade(self, db, factory, school):
        factory.grade(school["durand"], school["maths"], school["teacher"], school["t1"])
        factory.grade(school["durand"], school["french"], school["teacher"], school["t1"])
        factory.delete(school["maths"])

        durand = get_teacher_gradebook(db, school["teacher"].id)[0]

        subjects = [g.subject for g in durand.grades]
        assert len(subjects) == 2
        assert sum(isinstance(s, UnresolvedReference) for s in subjects) == 1

    def test_storage_failure_aborts_gradebook(self):
        """A database error while assembling is reported as Unavailable."""
        session = MagicMock()
        session.query.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))

        with pytest.raises(Unavailable) as exc_info:
            get_teacher_gradebook(session, "a" * 24)
        assert isinstance(exc_info.value.__cause__, OperationalError)
