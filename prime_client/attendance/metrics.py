"""
Attendance Metrics

Lateness is measured against a fixed 06:30 start on the check-in's own
calendar date; a full shift is 8 hours.
"""

from datetime import datetime, time
from typing import Optional

from prime_client.attendance.schemas import (
    AttendanceMetrics,
    AttendanceStatus,
    AttendanceSummary,
)
from prime_client.common.errors import InvalidIntervalError, MixedTimezoneError

EXPECTED_START = time(6, 30)
FULL_SHIFT_HOURS = 8.0
# Late by more than this many minutes counts as half a day
HALF_DAY_LATE_MINUTES = 120

SECONDS_PER_HOUR = 3600


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def calculate_attendance_metrics(
    check_in_time: datetime, check_out_time: Optional[datetime] = None
) -> AttendanceMetrics:
    """
    Derive lateness and hours worked for one attendance record.

    The 06:30 threshold is built on the check-in's date and keeps its tzinfo,
    so aware and naive timestamps are both compared in their own local time.

    Args:
        check_in_time: When the agent checked in
        check_out_time: When the agent checked out, if they have

    Returns:
        AttendanceMetrics with is_late, late_minutes, total_hours_worked,
        is_early_checkout

    Raises:
        InvalidIntervalError: If check-out precedes check-in
        MixedTimezoneError: If exactly one of the two timestamps is
            timezone-aware; a naive time is never assumed to be in any zone
    """
    if check_out_time is not None and _is_aware(check_in_time) != _is_aware(
        check_out_time
    ):
        raise MixedTimezoneError(check_in_time, check_out_time)

    threshold = check_in_time.replace(
        hour=EXPECTED_START.hour,
        minute=EXPECTED_START.minute,
        second=0,
        microsecond=0,
    )

    is_late = check_in_time > threshold
    late_minutes = int((check_in_time - threshold).total_seconds() // 60) if is_late else 0

    total_hours_worked = 0.0
    is_early_checkout = False

    if check_out_time is not None:
        if check_out_time < check_in_time:
            raise InvalidIntervalError(check_in_time, check_out_time)
        total_hours_worked = (
            check_out_time - check_in_time
        ).total_seconds() / SECONDS_PER_HOUR
        is_early_checkout = total_hours_worked < FULL_SHIFT_HOURS

    return AttendanceMetrics(
        is_late=is_late,
        late_minutes=late_minutes,
        total_hours_worked=total_hours_worked,
        is_early_checkout=is_early_checkout,
    )


def resolve_attendance_status(
    status: AttendanceStatus, metrics: AttendanceMetrics
) -> AttendanceStatus:
    """Downgrade a PRESENT record that was late; other statuses pass through."""
    if status != AttendanceStatus.PRESENT or not metrics.is_late:
        return status
    if metrics.late_minutes > HALF_DAY_LATE_MINUTES:
        return AttendanceStatus.HALF_DAY
    return AttendanceStatus.LATE


def calculate_attendance_percentage(summary: AttendanceSummary) -> float:
    """Present days plus half of the half-days, over the month's days."""
    if summary.total_days_this_month <= 0:
        return 0.0
    effective_days = summary.present_days + summary.half_days * 0.5
    return effective_days / summary.total_days_this_month * 100
