"""Unit tests for attendance lateness and hours-worked metrics.

Pure function calls, no HTTP layer involved.
"""

from datetime import datetime, timedelta, timezone

import pytest
from prime_client.attendance import (
    AttendanceMetrics,
    AttendanceStatus,
    AttendanceSummary,
    calculate_attendance_metrics,
    calculate_attendance_percentage,
    resolve_attendance_status,
)
from prime_client.common.datetime_utils import utc_now
from prime_client.common.errors import (
    InvalidIntervalError,
    MetricsError,
    MixedTimezoneError,
)

DAY = datetime(2024, 5, 6)


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return DAY.replace(hour=hour, minute=minute, second=second)


# ---------------------------------------------------------------------------
# calculate_attendance_metrics
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_late_check_in_with_full_shift():
    """06:45 to 15:45 is 15 minutes late and a full 9-hour day."""
    metrics = calculate_attendance_metrics(at(6, 45), at(15, 45))

    assert metrics.is_late is True
    assert metrics.late_minutes == 15
    assert metrics.total_hours_worked == 9
    assert metrics.is_early_checkout is False


@pytest.mark.unit
def test_check_in_before_threshold_is_on_time():
    metrics = calculate_attendance_metrics(at(6, 15))

    assert metrics.is_late is False
    assert metrics.late_minutes == 0


@pytest.mark.unit
def test_check_in_exactly_at_threshold_is_on_time():
    """Late means strictly after 06:30."""
    metrics = calculate_attendance_metrics(at(6, 30))

    assert metrics.is_late is False
    assert metrics.late_minutes == 0


@pytest.mark.unit
def test_late_minutes_are_floored():
    metrics = calculate_attendance_metrics(at(6, 30, 59))
    assert metrics.is_late is True
    assert metrics.late_minutes == 0

    metrics = calculate_attendance_metrics(at(7, 10, 30))
    assert metrics.late_minutes == 40


@pytest.mark.unit
def test_threshold_uses_check_in_calendar_date():
    """Just after midnight is early for that day, not late for the previous one."""
    metrics = calculate_attendance_metrics(datetime(2024, 5, 7, 0, 10))

    assert metrics.is_late is False


@pytest.mark.unit
def test_threshold_uses_check_in_timezone():
    tz = timezone(timedelta(hours=2))
    check_in = datetime(2024, 5, 6, 6, 45, tzinfo=tz)

    metrics = calculate_attendance_metrics(check_in)

    assert metrics.is_late is True
    assert metrics.late_minutes == 15


@pytest.mark.unit
def test_no_check_out_means_no_hours():
    metrics = calculate_attendance_metrics(at(6, 0))

    assert metrics.total_hours_worked == 0
    assert metrics.is_early_checkout is False


@pytest.mark.unit
def test_short_shift_is_early_checkout():
    metrics = calculate_attendance_metrics(at(6, 0), at(13, 30))

    assert metrics.total_hours_worked == pytest.approx(7.5)
    assert metrics.is_early_checkout is True


@pytest.mark.unit
def test_exactly_eight_hours_is_not_early():
    metrics = calculate_attendance_metrics(at(6, 0), at(14, 0))

    assert metrics.total_hours_worked == 8
    assert metrics.is_early_checkout is False


@pytest.mark.unit
def test_zero_length_interval_is_early_checkout():
    metrics = calculate_attendance_metrics(at(6, 0), at(6, 0))

    assert metrics.total_hours_worked == 0
    assert metrics.is_early_checkout is True


@pytest.mark.unit
def test_check_out_before_check_in_is_rejected():
    with pytest.raises(InvalidIntervalError) as exc_info:
        calculate_attendance_metrics(at(9, 0), at(8, 0))

    assert exc_info.value.start == at(9, 0)
    assert exc_info.value.end == at(8, 0)
    assert isinstance(exc_info.value, MetricsError)
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.unit
def test_naive_check_in_with_aware_check_out_is_rejected():
    check_in = at(6, 45)
    check_out = utc_now()

    with pytest.raises(MixedTimezoneError) as exc_info:
        calculate_attendance_metrics(check_in, check_out)

    assert exc_info.value.start == check_in
    assert exc_info.value.end == check_out
    assert isinstance(exc_info.value, MetricsError)

    with pytest.raises(MixedTimezoneError):
        calculate_attendance_metrics(check_in.replace(tzinfo=timezone.utc), at(15, 0))


@pytest.mark.unit
def test_metrics_serialize_with_wire_names():
    metrics = calculate_attendance_metrics(at(6, 45), at(15, 45))

    assert metrics.to_payload() == {
        "isLate": True,
        "lateMinutes": 15,
        "totalHoursWorked": 9.0,
        "isEarlyCheckout": False,
    }


# ---------------------------------------------------------------------------
# resolve_attendance_status
# ---------------------------------------------------------------------------


def _metrics(is_late: bool, late_minutes: int) -> AttendanceMetrics:
    return AttendanceMetrics(
        is_late=is_late,
        late_minutes=late_minutes,
        total_hours_worked=0.0,
        is_early_checkout=False,
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "status,is_late,late_minutes,expected",
    [
        (AttendanceStatus.PRESENT, False, 0, AttendanceStatus.PRESENT),
        (AttendanceStatus.PRESENT, True, 15, AttendanceStatus.LATE),
        (AttendanceStatus.PRESENT, True, 120, AttendanceStatus.LATE),
        (AttendanceStatus.PRESENT, True, 121, AttendanceStatus.HALF_DAY),
        (AttendanceStatus.ON_LEAVE, True, 200, AttendanceStatus.ON_LEAVE),
    ],
)
def test_resolve_attendance_status(status, is_late, late_minutes, expected):
    assert resolve_attendance_status(status, _metrics(is_late, late_minutes)) == expected


# ---------------------------------------------------------------------------
# calculate_attendance_percentage
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_attendance_percentage_counts_half_days_as_half():
    summary = AttendanceSummary(total_days_this_month=20, present_days=15, half_days=2)

    assert calculate_attendance_percentage(summary) == pytest.approx(80.0)


@pytest.mark.unit
def test_attendance_percentage_empty_month():
    assert calculate_attendance_percentage(AttendanceSummary()) == 0.0
