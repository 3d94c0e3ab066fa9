"""
Shared fixtures: a SQLite test database and entity factories.
"""
import os
import sys
from datetime import date

import pytest

# Must be set before config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("DEBUG", "false")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import (  # noqa: E402
    Base, engine, SessionLocal,
    Gender, Teacher, SchoolClass, Student, Subject, Trimester, Grade,
)


@pytest.fixture(scope="function")
def db():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


class Factory:
    """Creates and flushes entities so their ids are available."""

    def __init__(self, db):
        self.db = db

    def _save(self, entity):
        self.db.add(entity)
        self.db.commit()
        return entity

    def teacher(self, last_name="Lefebvre", first_name="Claire"):
        return self._save(Teacher(
            last_name=last_name,
            first_name=first_name,
            birth_date=date(1980, 3, 14),
            gender=Gender.FEMME,
        ))

    def school_class(self, name, teacher):
        return self._save(SchoolClass(name=name, teacher_id=teacher.id))

    def student(self, last_name, first_name, school_class, address=None):
        return self._save(Student(
            last_name=last_name,
            first_name=first_name,
            class_id=school_class.id,
            birth_date=date(2014, 5, 1),
            address=address,
            gender=Gender.HOMME,
        ))

    def subject(self, name):
        return self._save(Subject(name=name))

    def trimester(self, name="T1"):
        return self._save(Trimester(name=name, date=date(2025, 9, 1)))

    def grade(self, student, subject, teacher, trimester, score=12.0, coefficient=1.0, school_class=None):
        return self._save(Grade(
            student_id=student.id,
            class_id=school_class.id if school_class is not None else student.class_id,
            subject_id=subject.id,
            teacher_id=teacher.id,
            trimester_id=trimester.id,
            score=score,
            coefficient=coefficient,
        ))

    def delete(self, entity):
        self.db.delete(entity)
        self.db.commit()


@pytest.fixture
def factory(db):
    return Factory(db)


@pytest.fixture
def school(factory):
    """
    One teacher owning class CM1-A with two students, two subjects and
    one trimester, no grades yet.
    """
    teacher = factory.teacher()
    school_class = factory.school_class("CM1-A", teacher)
    return {
        "teacher": teacher,
        "class": school_class,
        "martin": factory.student("Martin", "Lucas", school_class),
        "durand": factory.student("Durand", "Emma", school_class, address="12 rue des Lilas"),
        "maths": factory.subject("Mathématiques"),
        "french": factory.subject("Français"),
        "t1": factory.trimester("T1"),
    }
