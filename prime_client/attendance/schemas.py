import enum
from datetime import datetime
from typing import Optional

from prime_client.common.schemas import CamelModel


class AttendanceStatus(str, enum.Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    HALF_DAY = "HALF_DAY"
    ON_LEAVE = "ON_LEAVE"


class AttendanceRequest(CamelModel):
    check_in_time: datetime
    check_out_time: Optional[datetime] = None
    status: AttendanceStatus
    work_location: str
    notes: Optional[str] = None
    is_remote_work: Optional[bool] = None


class CheckOutRequest(CamelModel):
    check_out_time: datetime


class StatusUpdateRequest(CamelModel):
    status: AttendanceStatus
    notes: Optional[str] = None


class AttendanceSummary(CamelModel):
    """Monthly counts for one agent."""

    total_days_this_month: int = 0
    present_days: int = 0
    late_days: int = 0
    half_days: int = 0
    absent_days: int = 0
    leave_days: int = 0
    average_hours_worked: float = 0.0
    attendance_percentage: float = 0.0


class AttendanceResponse(CamelModel):
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

    # Attendance details
    check_in_time: datetime
    check_out_time: Optional[datetime] = None
    status: AttendanceStatus
    work_location: Optional[str] = None
    notes: Optional[str] = None
    total_hours_worked: float = 0.0

    # Metrics as stored server-side
    is_late: bool = False
    is_early_checkout: bool = False
    late_minutes: int = 0

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    summary: Optional[AttendanceSummary] = None

    @property
    def agent_full_name(self) -> str:
        return f"{self.agent_first_name} {self.agent_last_name}"

    @property
    def manager_full_name(self) -> Optional[str]:
        if self.manager_id is None:
            return None
        return f"{self.manager_first_name} {self.manager_last_name}"


class AttendanceMetrics(CamelModel):
    """Derived lateness and hours for one attendance record."""

    is_late: bool
    late_minutes: int
    total_hours_worked: float
    is_early_checkout: bool
