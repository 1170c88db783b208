# staffroom/api/attendance.py
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from staffroom.api.deps import get_db, require_teacher, resolve_date
from staffroom.core.coverage import attendance_for_date
from staffroom.crud import activity_log as crud_activity_log
from staffroom.crud import attendance as crud_attendance
from staffroom.schemas.attendance import AttendanceCreate, AttendanceOut, TeacherAttendance

router = APIRouter()
logger = logging.getLogger(__name__)


# Daily register: all teachers, unmarked ones reported present
@router.get("", response_model=List[TeacherAttendance])
def get_attendance(
    day: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    return attendance_for_date(db, resolve_date(day))


# Mark a teacher present/absent (updates the day's record if there is one)
@router.post("", response_model=AttendanceOut, status_code=201)
def record_attendance(record: AttendanceCreate, db: Session = Depends(get_db)):
    require_teacher(db, record.teacher_id, status_code=400)

    try:
        attendance = crud_attendance.upsert_attendance(
            db, record.teacher_id, record.date, record.status
        )
        crud_activity_log.create_activity_log(
            db,
            day=record.date,
            teacher_id=record.teacher_id,
            action=f"Marked {record.status}",
            status="Completed",
        )
        db.commit()
        db.refresh(attendance)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"[Attendance] failed to record teacher #{record.teacher_id}")
        raise HTTPException(status_code=500, detail="Failed to record attendance")

    logger.info(f"[Attendance] teacher #{record.teacher_id} {record.status} on {record.date}")
    return attendance
