# staffroom/crud/attendance.py
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from staffroom.db.models.attendance import Attendance


def get_attendance_by_date(db: Session, day: date) -> List[Attendance]:
    return db.query(Attendance).filter(Attendance.date == day).all()


def get_attendance_record(db: Session, teacher_id: int, day: date) -> Optional[Attendance]:
    return db.query(Attendance).filter(
        Attendance.teacher_id == teacher_id,
        Attendance.date == day,
    ).first()


def upsert_attendance(db: Session, teacher_id: int, day: date, status: str) -> Attendance:
    # find or create, one row per teacher and day
    record = get_attendance_record(db, teacher_id, day)
    if record:
        record.status = status
    else:
        record = Attendance(teacher_id=teacher_id, date=day, status=status)
        db.add(record)
    db.flush()
    return record
