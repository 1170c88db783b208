# staffroom/schemas/period.py
from typing import Literal, Optional

from pydantic import Field

from staffroom.schemas.base import CamelModel

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class PeriodConfigCreate(CamelModel):
    period_number: int = Field(gt=0)
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)
    active: bool = True


class PeriodConfigUpdate(CamelModel):
    period_number: Optional[int] = Field(default=None, gt=0)
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    active: Optional[bool] = None


class PeriodConfigOut(CamelModel):
    id: int
    period_number: int
    start_time: str
    end_time: str
    active: bool


class PeriodStatusOut(CamelModel):
    time: str
    state: Literal["in progress", "upcoming", "ended"]
    label: str
    period: Optional[PeriodConfigOut] = None
    next_period: Optional[PeriodConfigOut] = None
    configured: int
