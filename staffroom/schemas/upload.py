# staffroom/schemas/upload.py
from typing import List, Optional

from staffroom.schemas.base import CamelModel
from staffroom.schemas.teacher import TeacherOut


class UploadResult(CamelModel):
    message: str
    total: int
    created: int
    skipped: int
    # timetable uploads only: number of entries written
    count: Optional[int] = None
    teachers: List[TeacherOut] = []
