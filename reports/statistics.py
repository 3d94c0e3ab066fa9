"""
Weighted grade statistics.
"""
from typing import Sequence

from .schemas import GradeStatistics, ResolvedGrade


def compute_statistics(grades: Sequence[ResolvedGrade]) -> GradeStatistics:
    """
    Compute statistics for a list of grades.

    The average is weighted: sum(score * coefficient) / sum(coefficient).

    Args:
        grades: Resolved grades

    Returns:
        GradeStatistics with weighted average, min, max and totals
    """
    if not grades:
        return GradeStatistics(total_grades=0, total_coefficient=0.0)

    total_coefficient = sum(g.coefficient for g in grades)
    weighted_sum = sum(g.weighted_score for g in grades)
    scores = [g.score for g in grades]

    return GradeStatistics(
        total_grades=len(grades),
        total_coefficient=round(total_coefficient, 2),
        weighted_average=round(weighted_sum / total_coefficient, 2),
        min_score=min(scores),
        max_score=max(scores),
    )
