# staffroom/schemas/teacher.py
from typing import Optional

from staffroom.schemas.base import CamelModel


class TeacherCreate(CamelModel):
    name: str
    phone_number: Optional[str] = None
    # derived from the name when omitted
    initials: Optional[str] = None


class TeacherUpdate(CamelModel):
    name: Optional[str] = None
    phone_number: Optional[str] = None


class TeacherOut(CamelModel):
    id: int
    name: str
    phone_number: Optional[str] = None
    initials: str
