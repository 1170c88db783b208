# staffroom/core/coverage.py
"""Daily register and cover view: who is out, which of their classes still need a substitute."""
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from staffroom.crud import attendance as crud_attendance
from staffroom.crud import substitution as crud_substitution
from staffroom.crud import teacher as crud_teacher
from staffroom.crud import timetable as crud_timetable

DAYS_OF_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

PRESENT = "present"
ABSENT = "absent"


def day_of_week(day: date) -> str:
    return DAYS_OF_WEEK[day.weekday()]


def attendance_for_date(db: Session, day: date) -> List[dict]:
    """Every teacher with their status for ``day``; unmarked means present."""
    records = {r.teacher_id: r for r in crud_attendance.get_attendance_by_date(db, day)}
    register = []
    for teacher in crud_teacher.get_teachers(db):
        record = records.get(teacher.id)
        register.append({
            "teacher_id": teacher.id,
            "name": teacher.name,
            "phone_number": teacher.phone_number,
            "initials": teacher.initials,
            "status": record.status if record else PRESENT,
            "attendance_id": record.id if record else None,
        })
    return register


def absent_teacher_ids(db: Session, day: date) -> set:
    return {
        r.teacher_id
        for r in crud_attendance.get_attendance_by_date(db, day)
        if r.status == ABSENT
    }


def absence_overview(db: Session, day: date) -> dict:
    weekday = day_of_week(day)
    absent_ids = absent_teacher_ids(db, day)
    covered = {
        (s.original_teacher_id, s.period, s.class_name)
        for s in crud_substitution.get_substitutions(db, day)
    }

    absent_teachers = []
    for teacher in crud_teacher.get_teachers(db):
        if teacher.id not in absent_ids:
            continue
        classes = [
            {
                "period": entry.period,
                "class_name": entry.class_name,
                "has_substitute": (teacher.id, entry.period, entry.class_name) in covered,
            }
            for entry in crud_timetable.get_timetable(db, day=weekday, teacher_id=teacher.id)
        ]
        absent_teachers.append({
            "teacher_id": teacher.id,
            "name": teacher.name,
            "initials": teacher.initials,
            "phone_number": teacher.phone_number,
            "classes": classes,
        })

    return {"date": day, "day": weekday, "absent_teachers": absent_teachers}


def is_slot_covered(
    db: Session,
    day: date,
    period: int,
    class_name: str,
    original_teacher_id: int,
) -> bool:
    return crud_substitution.find_substitution_for_slot(
        db, day, period, class_name, original_teacher_id
    ) is not None


def available_substitutes(
    db: Session,
    day: date,
    period: int,
    absent_teacher_id: Optional[int] = None,
) -> list:
    """Teachers who can take a class in ``period`` on ``day``.

    Excludes the absent teacher, anyone else marked absent that day and
    anyone already covering another class in the same period.
    """
    absent_ids = absent_teacher_ids(db, day)
    busy_ids = {
        s.substitute_teacher_id
        for s in crud_substitution.get_substitutions(db, day)
        if s.period == period
    }
    return [
        teacher
        for teacher in crud_teacher.get_teachers(db)
        if teacher.id != absent_teacher_id
        and teacher.id not in absent_ids
        and teacher.id not in busy_ids
    ]
