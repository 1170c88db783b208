# staffroom/api/substitutions.py
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from staffroom.api.deps import get_db, require_teacher, resolve_date
from staffroom.core.coverage import absence_overview, available_substitutes, is_slot_covered
from staffroom.core.sms import substitute_message
from staffroom.crud import activity_log as crud_activity_log
from staffroom.crud import substitution as crud_substitution
from staffroom.crud import teacher as crud_teacher
from staffroom.schemas.substitution import (
    AbsenceOverview,
    SubstitutionCreate,
    SubstitutionMessage,
    SubstitutionOut,
    SubstitutionUpdate,
)
from staffroom.schemas.teacher import TeacherOut

router = APIRouter()
absences_router = APIRouter()
logger = logging.getLogger(__name__)

UNKNOWN = "Unknown Teacher"


def substitution_out(sub, teachers: dict) -> SubstitutionOut:
    original = teachers.get(sub.original_teacher_id)
    substitute = teachers.get(sub.substitute_teacher_id)
    return SubstitutionOut(
        id=sub.id,
        date=sub.date,
        period=sub.period,
        class_name=sub.class_name,
        original_teacher_id=sub.original_teacher_id,
        substitute_teacher_id=sub.substitute_teacher_id,
        status=sub.status,
        created_at=sub.created_at,
        original_teacher_name=original.name if original else UNKNOWN,
        substitute_teacher_name=substitute.name if substitute else UNKNOWN,
    )


def _teachers_for(db: Session, subs) -> dict:
    ids = set()
    for sub in subs:
        ids.update((sub.original_teacher_id, sub.substitute_teacher_id))
    return crud_teacher.get_teachers_by_ids(db, ids)


def _get_or_404(db: Session, substitution_id: int):
    sub = crud_substitution.get_substitution(db, substitution_id)
    if not sub:
        raise HTTPException(status_code=404, detail="Substitution not found")
    return sub


@router.get("", response_model=List[SubstitutionOut])
def get_substitutions(
    day: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    subs = crud_substitution.get_substitutions(db, resolve_date(day))
    teachers = _teachers_for(db, subs)
    return [substitution_out(sub, teachers) for sub in subs]


# Who can cover `period` on `date` for an absent teacher
@router.get("/available", response_model=List[TeacherOut])
def get_available_substitutes(
    period: int,
    day: Optional[date] = Query(None, alias="date"),
    teacher_id: Optional[int] = Query(None, alias="teacherId"),
    db: Session = Depends(get_db),
):
    return available_substitutes(db, resolve_date(day), period, absent_teacher_id=teacher_id)


@router.post("", response_model=SubstitutionOut, status_code=201)
def create_substitution(sub_in: SubstitutionCreate, db: Session = Depends(get_db)):
    original = require_teacher(db, sub_in.original_teacher_id, status_code=400)
    substitute = require_teacher(db, sub_in.substitute_teacher_id, status_code=400)
    if original.id == substitute.id:
        raise HTTPException(status_code=400, detail="A teacher cannot substitute for themselves")

    if is_slot_covered(db, sub_in.date, sub_in.period, sub_in.class_name, original.id):
        raise HTTPException(status_code=409, detail="This class already has a substitute")

    try:
        sub = crud_substitution.create_substitution(db, sub_in)
        crud_activity_log.create_activity_log(
            db,
            day=sub_in.date,
            teacher_id=substitute.id,
            action=f"Substituted Class {sub_in.class_name}",
            status="Assigned",
        )
        db.commit()
        db.refresh(sub)
    except IntegrityError:
        # lost the race against a concurrent assignment of the same slot
        db.rollback()
        raise HTTPException(status_code=409, detail="This class already has a substitute")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[Substitutions] failed to create substitution")
        raise HTTPException(status_code=500, detail="Failed to create substitution")

    logger.info(
        f"[Substitutions] {substitute.name} covers {sub.class_name} "
        f"P{sub.period} on {sub.date} for {original.name}"
    )
    return substitution_out(sub, {original.id: original, substitute.id: substitute})


@router.patch("/{substitution_id}", response_model=SubstitutionOut)
def update_substitution(
    substitution_id: int,
    sub_in: SubstitutionUpdate,
    db: Session = Depends(get_db),
):
    sub = _get_or_404(db, substitution_id)
    if sub_in.substitute_teacher_id is not None:
        require_teacher(db, sub_in.substitute_teacher_id, status_code=400)
        if sub_in.substitute_teacher_id == sub.original_teacher_id:
            raise HTTPException(status_code=400, detail="A teacher cannot substitute for themselves")

    try:
        crud_substitution.update_substitution(db, sub, sub_in)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"[Substitutions] failed to update #{substitution_id}")
        raise HTTPException(status_code=500, detail="Failed to update substitution")

    return substitution_out(sub, _teachers_for(db, [sub]))


# Notification text for the substitute, ready to send through /api/messages
@router.get("/{substitution_id}/message", response_model=SubstitutionMessage)
def get_substitution_message(substitution_id: int, db: Session = Depends(get_db)):
    sub = _get_or_404(db, substitution_id)
    substitute = require_teacher(db, sub.substitute_teacher_id)
    return SubstitutionMessage(
        substitution_id=sub.id,
        teacher_id=substitute.id,
        message=substitute_message(substitute.name, sub.class_name, sub.period, sub.date),
    )


@absences_router.get("", response_model=AbsenceOverview)
def get_absences(
    day: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    return absence_overview(db, resolve_date(day))
