# staffroom/schemas/substitution.py
import datetime
from typing import List, Literal, Optional

from pydantic import Field

from staffroom.schemas.base import CamelModel

SubstitutionStatus = Literal["pending", "confirmed", "completed"]


class SubstitutionCreate(CamelModel):
    date: datetime.date
    period: int
    class_name: str = Field(alias="class")
    original_teacher_id: int
    substitute_teacher_id: int
    status: SubstitutionStatus = "pending"


class SubstitutionUpdate(CamelModel):
    substitute_teacher_id: Optional[int] = None
    status: Optional[SubstitutionStatus] = None


class SubstitutionOut(CamelModel):
    id: int
    date: datetime.date
    period: int
    class_name: str = Field(alias="class")
    original_teacher_id: int
    substitute_teacher_id: int
    status: SubstitutionStatus
    created_at: datetime.datetime
    original_teacher_name: str = "Unknown Teacher"
    substitute_teacher_name: str = "Unknown Teacher"


class SubstitutionMessage(CamelModel):
    substitution_id: int
    teacher_id: int
    message: str


class ClassToCover(CamelModel):
    period: int
    class_name: str = Field(alias="class")
    has_substitute: bool


class AbsentTeacher(CamelModel):
    teacher_id: int
    name: str
    initials: str
    phone_number: Optional[str] = None
    classes: List[ClassToCover] = []


class AbsenceOverview(CamelModel):
    date: datetime.date
    day: str
    absent_teachers: List[AbsentTeacher]
