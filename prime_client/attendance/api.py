"""Attendance endpoints."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import TypeAdapter
from prime_client.attendance.schemas import (
    AttendanceRequest,
    AttendanceResponse,
    AttendanceStatus,
    AttendanceSummary,
    CheckOutRequest,
    StatusUpdateRequest,
)
from prime_client.common.datetime_utils import format_date_for_api
from prime_client.common.service_client import ServiceClient

ATTENDANCE_PATH = "/attendance"
CHECK_IN_PATH = "/attendance/check-in"
TEAM_PATH = "/attendance/team"

_attendance_list = TypeAdapter(List[AttendanceResponse])


def attendance_path(attendance_id: int) -> str:
    return f"{ATTENDANCE_PATH}/{attendance_id}"


def check_out_path(attendance_id: int) -> str:
    return f"{ATTENDANCE_PATH}/{attendance_id}/check-out"


def status_path(attendance_id: int) -> str:
    return f"{ATTENDANCE_PATH}/{attendance_id}/status"


def summary_path(year: int, month: int) -> str:
    return f"{ATTENDANCE_PATH}/summary/{year}/{month}"


class AttendanceApi(ServiceClient):
    """Check-in/out and attendance queries for agents and managers."""

    async def get_all(self, access_token: str) -> List[AttendanceResponse]:
        """Get all attendances for the current user."""
        payload = await self.get(ATTENDANCE_PATH, token=access_token)
        return _attendance_list.validate_python(payload)

    async def get_by_id(self, access_token: str, attendance_id: int) -> AttendanceResponse:
        payload = await self.get(attendance_path(attendance_id), token=access_token)
        return AttendanceResponse.model_validate(payload)

    async def check_in(
        self, access_token: str, data: AttendanceRequest
    ) -> AttendanceResponse:
        payload = await self.post(
            CHECK_IN_PATH, token=access_token, json=data.to_payload()
        )
        return AttendanceResponse.model_validate(payload)

    async def check_out(
        self, access_token: str, attendance_id: int, check_out_time: datetime
    ) -> AttendanceResponse:
        body = CheckOutRequest(check_out_time=check_out_time)
        payload = await self.put(
            check_out_path(attendance_id), token=access_token, json=body.to_payload()
        )
        return AttendanceResponse.model_validate(payload)

    async def get_monthly_summary(
        self, access_token: str, year: int, month: int
    ) -> AttendanceSummary:
        """
        Get the monthly attendance summary.

        Args:
            year: Calendar year
            month: Month, 1-12

        Raises:
            ValueError: If month is outside 1-12
        """
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        payload = await self.get(summary_path(year, month), token=access_token)
        return AttendanceSummary.model_validate(payload)

    async def get_team_attendance(
        self, access_token: str, day: date
    ) -> List[AttendanceResponse]:
        """Get team attendance for one day (managers only)."""
        payload = await self.get(
            TEAM_PATH,
            token=access_token,
            params={"date": format_date_for_api(day)},
        )
        return _attendance_list.validate_python(payload)

    async def update_status(
        self,
        access_token: str,
        attendance_id: int,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> AttendanceResponse:
        body = StatusUpdateRequest(status=status, notes=notes)
        payload = await self.put(
            status_path(attendance_id), token=access_token, json=body.to_payload()
        )
        return AttendanceResponse.model_validate(payload)
