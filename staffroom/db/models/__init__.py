from staffroom.db.base import Base
from staffroom.db.models.teacher import Teacher
from staffroom.db.models.attendance import Attendance
from staffroom.db.models.timetable import TimetableEntry
from staffroom.db.models.substitution import Substitution
from staffroom.db.models.period_config import PeriodConfig
from staffroom.db.models.activity_log import ActivityLog
from staffroom.db.models.message import Message

__all__ = [
    "Base",
    "Teacher",
    "Attendance",
    "TimetableEntry",
    "Substitution",
    "PeriodConfig",
    "ActivityLog",
    "Message",
]
