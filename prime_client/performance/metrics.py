"""
Performance Scoring

Overall score is a weighted sum of sales achievement, client retention,
customer satisfaction, attendance, and quality. The sum is not clamped: an
agent far above target can score past 100, which still rates OUTSTANDING.
"""

from typing import Optional

from prime_client.common.errors import DivisionByZeroError
from prime_client.performance.schemas import PerformanceMetrics, PerformanceRating

SALES_WEIGHT = 0.4
RETENTION_WEIGHT = 0.2
SATISFACTION_WEIGHT = 0.2
ATTENDANCE_WEIGHT = 0.1
QUALITY_WEIGHT = 0.1

# (minimum score, rating), highest band first; each floor is inclusive
RATING_BANDS: list[tuple[float, PerformanceRating]] = [
    (90.0, PerformanceRating.OUTSTANDING),
    (80.0, PerformanceRating.EXCEEDS_EXPECTATIONS),
    (70.0, PerformanceRating.MEETS_EXPECTATIONS),
    (60.0, PerformanceRating.NEEDS_IMPROVEMENT),
]


def calculate_achievement_percentage(
    sales_achieved: float, sales_target: float
) -> float:
    """
    Sales achieved as a percentage of target.

    Raises:
        DivisionByZeroError: If sales_target is zero
    """
    if sales_target == 0:
        raise DivisionByZeroError("sales_target")
    return sales_achieved / sales_target * 100


def determine_rating(overall_score: float) -> PerformanceRating:
    for floor, rating in RATING_BANDS:
        if overall_score >= floor:
            return rating
    return PerformanceRating.UNSATISFACTORY


def score_performance(
    *,
    sales_target: float,
    sales_achieved: float,
    attendance_score: float,
    quality_score: float,
    client_retention_rate: Optional[float] = None,
    customer_satisfaction_score: Optional[float] = None,
) -> PerformanceMetrics:
    """
    Compute achievement, weighted overall score, and rating.

    Missing retention and satisfaction values count as 0.

    Raises:
        DivisionByZeroError: If sales_target is zero
    """
    achievement_percentage = calculate_achievement_percentage(
        sales_achieved, sales_target
    )

    overall_score = (
        achievement_percentage * SALES_WEIGHT
        + (client_retention_rate or 0) * RETENTION_WEIGHT
        + (customer_satisfaction_score or 0) * SATISFACTION_WEIGHT
        + attendance_score * ATTENDANCE_WEIGHT
        + quality_score * QUALITY_WEIGHT
    )

    return PerformanceMetrics(
        achievement_percentage=achievement_percentage,
        overall_score=overall_score,
        rating=determine_rating(overall_score),
    )


def calculate_performance_metrics(record) -> PerformanceMetrics:
    """Score any record exposing the performance fields (request or response)."""
    return score_performance(
        sales_target=record.sales_target,
        sales_achieved=record.sales_achieved,
        attendance_score=record.attendance_score,
        quality_score=record.quality_score,
        client_retention_rate=record.client_retention_rate,
        customer_satisfaction_score=record.customer_satisfaction_score,
    )
