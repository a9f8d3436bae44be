"""Datetime utilities shared by the API wrappers.

The metric calculators never read the clock; callers use ``local_today()``
(or any date they like) and pass it in explicitly:

    from prime_client.common.datetime_utils import local_today

    metrics = calculate_policy_status(end_date, status, today=local_today())
"""

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from prime_client.common.config import get_settings


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def local_today(tz_name: Optional[str] = None) -> date:
    """Return today's date in ``tz_name`` (defaults to ``Settings.TIMEZONE``)."""
    tz = ZoneInfo(tz_name or get_settings().TIMEZONE)
    return datetime.now(tz).date()


def format_date_for_api(value: date) -> str:
    """Format as ``YYYY-MM-DD``; datetimes are cut to their date part."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def format_datetime_for_api(value: datetime) -> str:
    """Format as ISO-8601, keeping the offset when the value has one."""
    return value.isoformat()
