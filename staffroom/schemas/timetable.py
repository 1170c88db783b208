# staffroom/schemas/timetable.py
from pydantic import Field

from staffroom.schemas.base import CamelModel


class TimetableCreate(CamelModel):
    day: str
    period: int
    class_name: str = Field(alias="class")
    teacher_id: int


class TimetableOut(TimetableCreate):
    id: int
    teacher_name: str
