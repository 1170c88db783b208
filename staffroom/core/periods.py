# staffroom/core/periods.py
from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional, Sequence

# (period number, start, end) of the default school day
DEFAULT_PERIODS = [
    (1, "08:00", "08:45"),
    (2, "08:50", "09:35"),
    (3, "09:40", "10:25"),
    (4, "10:30", "11:15"),
    (5, "11:30", "12:15"),
    (6, "12:20", "13:05"),
    (7, "13:10", "13:55"),
    (8, "14:00", "14:45"),
]

IN_PROGRESS = "in progress"
UPCOMING = "upcoming"
ENDED = "ended"


@dataclass
class PeriodStatus:
    state: str
    period: Optional[object] = None
    next_period: Optional[object] = None

    @property
    def label(self) -> str:
        if self.state == ENDED:
            return "school day ended"
        if self.state == UPCOMING:
            return "next period"
        return IN_PROGRESS


def parse_clock(value: str) -> time:
    return datetime.strptime(value.strip(), "%H:%M").time()


def resolve_period_status(periods: Sequence, now: time) -> PeriodStatus:
    """Work out where ``now`` falls in the school day.

    ``periods`` are objects with ``period_number``, ``start_time``,
    ``end_time`` ("HH:MM") and ``active``. Inactive ones are ignored.
    Bounds are inclusive on both ends, so 08:45 is still period 1.
    """
    ordered = sorted(
        (p for p in periods if p.active),
        key=lambda p: p.period_number,
    )
    for index, period in enumerate(ordered):
        if parse_clock(period.start_time) <= now <= parse_clock(period.end_time):
            following = ordered[index + 1] if index + 1 < len(ordered) else None
            return PeriodStatus(IN_PROGRESS, period, following)

    for period in ordered:
        if parse_clock(period.start_time) > now:
            return PeriodStatus(UPCOMING, period)

    return PeriodStatus(ENDED)
