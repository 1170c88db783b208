# staffroom/api/timetable.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from staffroom.api.deps import get_db, require_teacher
from staffroom.crud import teacher as crud_teacher
from staffroom.crud import timetable as crud_timetable
from staffroom.schemas.timetable import TimetableCreate, TimetableOut

router = APIRouter()
logger = logging.getLogger(__name__)


def timetable_out(entry, teachers: dict) -> TimetableOut:
    teacher = teachers.get(entry.teacher_id)
    return TimetableOut(
        id=entry.id,
        day=entry.day,
        period=entry.period,
        class_name=entry.class_name,
        teacher_id=entry.teacher_id,
        teacher_name=teacher.name if teacher else "Unknown Teacher",
    )


@router.get("", response_model=List[TimetableOut])
def get_timetable(
    day: Optional[str] = Query(None),
    teacher_id: Optional[int] = Query(None, alias="teacherId"),
    db: Session = Depends(get_db),
):
    entries = crud_timetable.get_timetable(db, day=day, teacher_id=teacher_id)
    teachers = crud_teacher.get_teachers_by_ids(db, (e.teacher_id for e in entries))
    return [timetable_out(entry, teachers) for entry in entries]


@router.post("", response_model=TimetableOut, status_code=201)
def create_timetable_entry(entry_in: TimetableCreate, db: Session = Depends(get_db)):
    teacher = require_teacher(db, entry_in.teacher_id, status_code=400)

    try:
        entry, = crud_timetable.bulk_create_timetable(db, [entry_in.model_dump()])
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[Timetable] failed to create entry")
        raise HTTPException(status_code=500, detail="Failed to create timetable entry")

    return timetable_out(entry, {teacher.id: teacher})
