# staffroom/schemas/attendance.py
import datetime
from typing import Literal, Optional

from staffroom.schemas.base import CamelModel

AttendanceStatus = Literal["present", "absent"]


class AttendanceCreate(CamelModel):
    teacher_id: int
    date: datetime.date
    status: AttendanceStatus


class AttendanceOut(CamelModel):
    id: int
    teacher_id: int
    date: datetime.date
    status: AttendanceStatus
    created_at: datetime.datetime


class TeacherAttendance(CamelModel):
    """One row of the daily register: every teacher, marked or not."""

    teacher_id: int
    name: str
    phone_number: Optional[str] = None
    initials: str
    status: AttendanceStatus
    attendance_id: Optional[int] = None
