"""
Policy Metrics

Expiry countdown and renewal window for client policies. "Today" is always
passed in; nothing here reads the clock.
"""

from datetime import date, datetime
from typing import Optional

from prime_client.clients.schemas import PolicyMetrics, PolicyStatus
from prime_client.common.errors import MissingInputError

RENEWAL_WINDOW_DAYS = 30


def _as_date(value: date) -> date:
    # datetime is a date subclass but does not compare with plain dates
    if isinstance(value, datetime):
        return value.date()
    return value


def calculate_policy_status(
    policy_end_date: Optional[date],
    policy_status: Optional[PolicyStatus],
    *,
    today: date,
) -> PolicyMetrics:
    """
    Derive expiry and renewal flags for a policy.

    Args:
        policy_end_date: Last day the policy is in force
        policy_status: Current status tag, if known
        today: The reference date

    Returns:
        PolicyMetrics with is_active, is_expired, days_remaining,
        needs_renewal, is_expiring_soon

    Raises:
        MissingInputError: If policy_end_date is absent
    """
    if policy_end_date is None:
        raise MissingInputError("policy_end_date")

    end_date = _as_date(policy_end_date)
    today = _as_date(today)

    # Whole dates, so the day difference is already its own ceiling
    days_remaining = (end_date - today).days
    is_active = policy_status == PolicyStatus.ACTIVE
    is_expiring_soon = 0 <= days_remaining <= RENEWAL_WINDOW_DAYS

    return PolicyMetrics(
        is_active=is_active,
        is_expired=end_date < today,
        days_remaining=days_remaining,
        needs_renewal=is_active and is_expiring_soon,
        is_expiring_soon=is_expiring_soon,
    )


def years_as_client(created_at: Optional[date], *, today: date) -> Optional[int]:
    """Completed years since the client record was created, or None if unknown."""
    if created_at is None:
        return None

    start = _as_date(created_at)
    today = _as_date(today)

    years = today.year - start.year
    if (today.month, today.day) < (start.month, start.day):
        years -= 1
    return max(years, 0)
