# staffroom/schemas/activity_log.py
import datetime

from staffroom.schemas.base import CamelModel


class ActivityLogOut(CamelModel):
    id: int
    date: datetime.date
    teacher_id: int
    action: str
    status: str
    created_at: datetime.datetime
    teacher_name: str = "Unknown Teacher"
