"""
Report data structures.

Every reference carried by a resolved grade is either a snapshot of the
referenced entity (status "resolved") or an UnresolvedReference (status
"unresolved") when the id no longer matches a row. Optional fields such
as an address are plain Optional values and never use the marker.
"""
from datetime import date, datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class UnresolvedReference(BaseModel):
    """Marker for a foreign id that could not be resolved."""
    status: Literal["unresolved"] = "unresolved"
    entity: str
    id: str


class SubjectRef(BaseModel):
    status: Literal["resolved"] = "resolved"
    id: str
    name: str


class ClassRef(BaseModel):
    status: Literal["resolved"] = "resolved"
    id: str
    name: str


class TrimesterRef(BaseModel):
    status: Literal["resolved"] = "resolved"
    id: str
    name: str


class PersonRef(BaseModel):
    """Teacher or student identity."""
    status: Literal["resolved"] = "resolved"
    id: str
    last_name: str
    first_name: str


class StudentDetailRef(PersonRef):
    """Student identity with birth date, for the single-grade view."""
    birth_date: date


class TrimesterDetailRef(TrimesterRef):
    date: date


SubjectSnapshot = Annotated[Union[SubjectRef, UnresolvedReference], Field(discriminator="status")]
ClassSnapshot = Annotated[Union[ClassRef, UnresolvedReference], Field(discriminator="status")]
TrimesterSnapshot = Annotated[Union[TrimesterRef, UnresolvedReference], Field(discriminator="status")]
PersonSnapshot = Annotated[Union[PersonRef, UnresolvedReference], Field(discriminator="status")]
StudentDetailSnapshot = Annotated[Union[StudentDetailRef, UnresolvedReference], Field(discriminator="status")]
TrimesterDetailSnapshot = Annotated[Union[TrimesterDetailRef, UnresolvedReference], Field(discriminator="status")]


def is_resolved(snapshot) -> bool:
    """True when snapshot refers to an existing entity."""
    return snapshot.status == "resolved"


class ResolvedGrade(BaseModel):
    """A grade with denormalized snapshots of everything it references."""
    id: str
    student_id: str
    class_id: str
    subject_id: str
    teacher_id: str
    trimester_id: str
    score: float
    coefficient: float
    created_at: Optional[datetime] = None
    subject: SubjectSnapshot
    teacher: PersonSnapshot
    student: PersonSnapshot
    class_ref: ClassSnapshot
    trimester: TrimesterSnapshot

    @property
    def weighted_score(self) -> float:
        """Contribution of this grade to a weighted average."""
        return self.score * self.coefficient


class GradeDetail(ResolvedGrade):
    """A single grade with the student's birth date and the trimester date."""
    student: StudentDetailSnapshot
    trimester: TrimesterDetailSnapshot


class GradeStatistics(BaseModel):
    total_grades: int
    total_coefficient: float
    weighted_average: Optional[float] = None
    min_score: Optional[float] = None
    max_score: Optional[float] = None


class SubjectGroup(BaseModel):
    """All grades of one subject, sorted by student name."""
    subject: SubjectSnapshot
    grades: List[ResolvedGrade]
    statistics: GradeStatistics


class StudentSummary(BaseModel):
    id: str
    last_name: str
    first_name: str
    birth_date: date


class StudentGradebook(BaseModel):
    """One enrolled student and the grades a given teacher issued them."""
    student: StudentSummary
    class_ref: ClassRef
    grades: List[ResolvedGrade]
    statistics: GradeStatistics
