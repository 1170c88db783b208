# staffroom/db/__init__.py
# importing staffroom.db registers every model on Base

from staffroom.db.base import Base
from staffroom.db.models import (
    ActivityLog,
    Attendance,
    Message,
    PeriodConfig,
    Substitution,
    Teacher,
    TimetableEntry,
)

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
