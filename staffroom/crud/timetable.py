# staffroom/crud/timetable.py
from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from staffroom.db.models.timetable import TimetableEntry


def get_timetable(
    db: Session,
    day: Optional[str] = None,
    teacher_id: Optional[int] = None,
) -> List[TimetableEntry]:
    query = db.query(TimetableEntry)
    if day:
        query = query.filter(func.lower(TimetableEntry.day) == day.strip().lower())
    if teacher_id is not None:
        query = query.filter(TimetableEntry.teacher_id == teacher_id)
    return query.order_by(TimetableEntry.period, TimetableEntry.id).all()


def bulk_create_timetable(db: Session, entries: Iterable[dict]) -> List[TimetableEntry]:
    """Insert a batch of entries; ids come out strictly increasing in batch order."""
    created = [
        TimetableEntry(
            day=entry["day"],
            period=entry["period"],
            class_name=entry["class_name"],
            teacher_id=entry["teacher_id"],
        )
        for entry in entries
    ]
    db.add_all(created)
    db.flush()
    return created
