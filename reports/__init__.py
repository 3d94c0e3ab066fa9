"""
Grade aggregation and reporting engine for the School Records system.

This module turns flat grade records into report views: grades grouped
by subject, and per-teacher gradebooks.
"""
from .exceptions import (
    ReportError,
    InvalidArgument,
    NotFound,
    Unavailable,
)

from .schemas import (
    UnresolvedReference,
    SubjectRef,
    ClassRef,
    TrimesterRef,
    PersonRef,
    StudentDetailRef,
    TrimesterDetailRef,
    ResolvedGrade,
    GradeDetail,
    GradeStatistics,
    SubjectGroup,
    StudentSummary,
    StudentGradebook,
    is_resolved,
)

from .repository import SchoolRepository
from .resolver import ReferenceResolver
from .statistics import compute_statistics

from .grouping import (
    group_by_subject,
    group_grades_by_subject,
    total_grade_count,
)

from .gradebook import get_teacher_gradebook

from .grades_read import (
    list_grades,
    get_grade,
)

__all__ = [
    # Exceptions
    "ReportError",
    "InvalidArgument",
    "NotFound",
    "Unavailable",
    # Schemas
    "UnresolvedReference",
    "SubjectRef",
    "ClassRef",
    "TrimesterRef",
    "PersonRef",
    "StudentDetailRef",
    "TrimesterDetailRef",
    "ResolvedGrade",
    "GradeDetail",
    "GradeStatistics",
    "SubjectGroup",
    "StudentSummary",
    "StudentGradebook",
    "is_resolved",
    # Lookups
    "SchoolRepository",
    "ReferenceResolver",
    "compute_statistics",
    # Reports
    "group_by_subject",
    "group_grades_by_subject",
    "total_grade_count",
    "get_teacher_gradebook",
    "list_grades",
    "get_grade",
]
