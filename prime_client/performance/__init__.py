"""Performance review shapes, API, and scoring."""

from prime_client.performance.api import PerformanceApi
from prime_client.performance.metrics import (
    calculate_achievement_percentage,
    calculate_performance_metrics,
    determine_rating,
    score_performance,
)
from prime_client.performance.schemas import (
    FeedbackRequest,
    PerformanceMetrics,
    PerformanceRating,
    PerformanceRequest,
    PerformanceResponse,
    PerformanceTrend,
    PerformanceUpdate,
)

__all__ = [
    "FeedbackRequest",
    "PerformanceApi",
    "PerformanceMetrics",
    "PerformanceRating",
    "PerformanceRequest",
    "PerformanceResponse",
    "PerformanceTrend",
    "PerformanceUpdate",
    "calculate_achievement_percentage",
    "calculate_performance_metrics",
    "determine_rating",
    "score_performance",
]
