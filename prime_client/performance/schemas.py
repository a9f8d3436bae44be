import enum
from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator
from prime_client.common.schemas import CamelModel


class PerformanceRating(str, enum.Enum):
    OUTSTANDING = "OUTSTANDING"
    EXCEEDS_EXPECTATIONS = "EXCEEDS_EXPECTATIONS"
    MEETS_EXPECTATIONS = "MEETS_EXPECTATIONS"
    NEEDS_IMPROVEMENT = "NEEDS_IMPROVEMENT"
    UNSATISFACTORY = "UNSATISFACTORY"


class PerformanceRequest(CamelModel):
    """Schema for recording an agent's performance over a period."""

    period_start: date
    period_end: date
    new_clients_acquired: int = Field(..., ge=0)
    policies_renewed: int = Field(..., ge=0)
    total_premium_collected: float = Field(..., ge=0)
    sales_target: float = Field(..., ge=0)
    sales_achieved: float = Field(..., ge=0)
    client_retention_rate: Optional[float] = None
    customer_satisfaction_score: Optional[float] = None
    attendance_score: float
    quality_score: float
    manager_feedback: Optional[str] = None

    @model_validator(mode="after")
    def check_period(self) -> "PerformanceRequest":
        if self.period_end < self.period_start:
            raise ValueError("Period end date cannot be before period start date")
        return self


class PerformanceUpdate(CamelModel):
    """Partial update: only the fields that are set are sent."""

    period_start: Optional[date] = None
    period_end: Optional[date] = None
    new_clients_acquired: Optional[int] = Field(default=None, ge=0)
    policies_renewed: Optional[int] = Field(default=None, ge=0)
    total_premium_collected: Optional[float] = Field(default=None, ge=0)
    sales_target: Optional[float] = Field(default=None, ge=0)
    sales_achieved: Optional[float] = Field(default=None, ge=0)
    client_retention_rate: Optional[float] = None
    customer_satisfaction_score: Optional[float] = None
    attendance_score: Optional[float] = None
    quality_score: Optional[float] = None
    manager_feedback: Optional[str] = None


class FeedbackRequest(CamelModel):
    feedback: str = Field(..., min_length=1)


class PerformanceResponse(CamelModel):
    id: int

    # Agent information
    agent_id: int
    agent_first_name: str
    agent_last_name: str
    agent_email: str

    # Manager information
    manager_id: Optional[int] = None
    manager_first_name: Optional[str] = None
    manager_last_name: Optional[str] = None
    manager_email: Optional[str] = None

    period_start: date
    period_end: date
    new_clients_acquired: int = 0
    policies_renewed: int = 0
    total_premium_collected: float = 0.0
    sales_target: float
    sales_achieved: float
    achievement_percentage: Optional[float] = None
    client_retention_rate: Optional[float] = None
    customer_satisfaction_score: Optional[float] = None
    rating: Optional[PerformanceRating] = None
    manager_feedback: Optional[str] = None
    attendance_score: float = 0.0
    quality_score: float = 0.0
    overall_score: Optional[float] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PerformanceTrend(CamelModel):
    """Average overall score for one calendar month."""

    year: int
    month: int = Field(..., ge=1, le=12)
    average_score: float


class PerformanceMetrics(CamelModel):
    achievement_percentage: float
    overall_score: float
    rating: PerformanceRating
