"""
Pydantic schemas for API responses.
"""
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from reports import GradeDetail, ResolvedGrade, StudentGradebook, SubjectGroup


class GradesListResponse(BaseModel):
    """Flat list of grades."""
    success: bool = True
    count: int = Field(..., description="Number of grades")
    data: List[ResolvedGrade]


class GroupedGradesResponse(BaseModel):
    """Grades grouped by subject."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    count: int = Field(..., description="Number of subjects")
    total_grades: int = Field(..., alias="totalGrades", description="Number of grades across all subjects")
    data: List[SubjectGroup]


class GradeResponse(BaseModel):
    """Single grade response."""
    success: bool = True
    data: GradeDetail


class GradebookResponse(BaseModel):
    """Students of a teacher with the grades that teacher issued."""
    success: bool = True
    count: int = Field(..., description="Number of students")
    data: List[StudentGradebook]


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str
    error_type: Optional[str] = None
