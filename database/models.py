"""
Database models for the School Records system.
Defines the SQLAlchemy models for students, teachers, classes,
subjects, trimesters and grades.
"""
import secrets
from enum import Enum as PyEnum
from sqlalchemy import (
    Column, String, Float, Date, DateTime, Enum, ForeignKey, CheckConstraint
)
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def new_id() -> str:
    """Generate a 24-character lowercase hex identifier."""
    return secrets.token_hex(12)


class Gender(str, PyEnum):
    """Gender enum."""
    HOMME = "HOMME"
    FEMME = "FEMME"


class Teacher(Base):
    """
    Teachers table.

    Attributes:
        id: Unique identifier
        last_name: Surname
        first_name: Given name
        birth_date: Date of birth
        address: Postal address (optional)
        gender: HOMME or FEMME
    """
    __tablename__ = "teachers"

    id = Column(String(24), primary_key=True, default=new_id)
    last_name = Column(String(100), nullable=False)
    first_name = Column(String(100), nullable=False)
    birth_date = Column(Date, nullable=False)
    address = Column(String(250), nullable=True)
    gender = Column(Enum(Gender, name="gender"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    # Relationships
    classes = relationship("SchoolClass", back_populates="teacher")

    def __repr__(self):
        return f"<Teacher(id={self.id}, last_name='{self.last_name}', first_name='{self.first_name}')>"


class SchoolClass(Base):
    """
    Classes table. Each class has exactly one homeroom teacher.

    Attributes:
        id: Unique identifier
        name: Class name (e.g., "CM1-A")
        teacher_id: Homeroom teacher
    """
    __tablename__ = "classes"

    id = Column(String(24), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False, unique=True)
    teacher_id = Column(String(24), ForeignKey("teachers.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    # Relationships
    teacher = relationship("Teacher", back_populates="classes")
    students = relationship("Student", back_populates="school_class")

    def __repr__(self):
        return f"<SchoolClass(id={self.id}, name='{self.name}')>"


class Student(Base):
    """
    Students table. A student belongs to exactly one class.
    """
    __tablename__ = "students"

    id = Column(String(24), primary_key=True, default=new_id)
    last_name = Column(String(100), nullable=False)
    first_name = Column(String(100), nullable=False)
    class_id = Column(String(24), ForeignKey("classes.id"), nullable=False, index=True)
    birth_date = Column(Date, nullable=False)
    address = Column(String(250), nullable=True)
    gender = Column(Enum(Gender, name="gender"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    # Relationships
    school_class = relationship("SchoolClass", back_populates="students")

    def __repr__(self):
        return f"<Student(id={self.id}, last_name='{self.last_name}', first_name='{self.first_name}')>"


class Subject(Base):
    """Subjects table (e.g., "Mathématiques", "Français")."""
    __tablename__ = "subjects"

    id = Column(String(24), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime, nullable=False, default=func.now())

    def __repr__(self):
        return f"<Subject(id={self.id}, name='{self.name}')>"


class Trimester(Base):
    """Trimesters table - grading periods."""
    __tablename__ = "trimesters"

    id = Column(String(24), primary_key=True, default=new_id)
    name = Column(String(10), nullable=False)
    date = Column(Date, nullable=False)
    created_at = Column(DateTime, nullable=False, default=func.now())

    def __repr__(self):
        return f"<Trimester(id={self.id}, name='{self.name}')>"


class Grade(Base):
    """
    Grades table.

    The five references are plain indexed columns without foreign key
    constraints: a grade survives the deletion of the entities it points
    to, and reports flag those references as unresolved.

    Attributes:
        id: Unique identifier
        student_id: Student who received the grade
        class_id: Class the student was in when graded
        subject_id: Subject of the evaluation
        teacher_id: Teacher who issued the grade
        trimester_id: Grading period
        score: Grade value, 0-20 inclusive
        coefficient: Weight of the grade, strictly positive
        created_at: Timestamp of creation
    """
    __tablename__ = "grades"
    __table_args__ = (
        CheckConstraint("score >= 0 AND score <= 20", name="ck_grades_score_range"),
        CheckConstraint("coefficient > 0", name="ck_grades_coefficient_positive"),
    )

    id = Column(String(24), primary_key=True, default=new_id)
    student_id = Column(String(24), nullable=False, index=True)
    class_id = Column(String(24), nullable=False, index=True)
    subject_id = Column(String(24), nullable=False, index=True)
    teacher_id = Column(String(24), nullable=False, index=True)
    trimester_id = Column(String(24), nullable=False, index=True)
    score = Column(Float, nullable=False)
    coefficient = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Grade(id={self.id}, student_id={self.student_id}, subject_id={self.subject_id}, score={self.score})>"
