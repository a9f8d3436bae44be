"""Attendance shapes, API, and metrics."""

from prime_client.attendance.api import AttendanceApi
from prime_client.attendance.metrics import (
    calculate_attendance_metrics,
    calculate_attendance_percentage,
    resolve_attendance_status,
)
from prime_client.attendance.schemas import (
    AttendanceMetrics,
    AttendanceRequest,
    AttendanceResponse,
    AttendanceStatus,
    AttendanceSummary,
    CheckOutRequest,
    StatusUpdateRequest,
)

__all__ = [
    "AttendanceApi",
    "AttendanceMetrics",
    "AttendanceRequest",
    "AttendanceResponse",
    "AttendanceStatus",
    "AttendanceSummary",
    "CheckOutRequest",
    "StatusUpdateRequest",
    "calculate_attendance_metrics",
    "calculate_attendance_percentage",
    "resolve_attendance_status",
]
