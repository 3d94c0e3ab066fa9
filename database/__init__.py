"""Database module."""
from .models import Base, Gender, Teacher, SchoolClass, Student, Subject, Trimester, Grade, new_id
from .connection import engine, SessionLocal, get_db, get_db_context, init_db

__all__ = [
    "Base",
    "Gender",
    "Teacher",
    "SchoolClass",
    "Student",
    "Subject",
    "Trimester",
    "Grade",
    "new_id",
    "engine",
    "SessionLocal",
    "get_db",
    "get_db_context",
    "init_db",
]
