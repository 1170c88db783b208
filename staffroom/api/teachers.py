# staffroom/api/teachers.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from staffroom.api.deps import get_db, require_teacher
from staffroom.crud import teacher as crud_teacher
from staffroom.schemas.teacher import TeacherCreate, TeacherOut, TeacherUpdate

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[TeacherOut])
def list_teachers(db: Session = Depends(get_db)):
    return crud_teacher.get_teachers(db)


@router.get("/{teacher_id}", response_model=TeacherOut)
def get_teacher(teacher_id: int, db: Session = Depends(get_db)):
    return require_teacher(db, teacher_id)


@router.post("", response_model=TeacherOut, status_code=201)
def create_teacher(teacher_in: TeacherCreate, db: Session = Depends(get_db)):
    if crud_teacher.get_teacher_by_name(db, teacher_in.name):
        raise HTTPException(status_code=409, detail="Teacher already exists")

    try:
        teacher = crud_teacher.create_teacher(
            db,
            name=teacher_in.name,
            phone_number=teacher_in.phone_number,
            initials=teacher_in.initials,
        )
        db.commit()
    except ValueError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Invalid teacher data")
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Teacher already exists")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[Teachers] failed to create teacher")
        raise HTTPException(status_code=500, detail="Failed to create teacher")

    logger.info(f"[Teachers] created #{teacher.id} {teacher.name}")
    return teacher


@router.patch("/{teacher_id}", response_model=TeacherOut)
def update_teacher(teacher_id: int, teacher_in: TeacherUpdate, db: Session = Depends(get_db)):
    teacher = require_teacher(db, teacher_id)

    if teacher_in.name is not None:
        other = crud_teacher.get_teacher_by_name(db, teacher_in.name)
        if other and other.id != teacher.id:
            raise HTTPException(status_code=409, detail="Teacher already exists")

    try:
        crud_teacher.update_teacher(
            db,
            teacher,
            name=teacher_in.name,
            phone_number=teacher_in.phone_number,
        )
        db.commit()
    except ValueError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Invalid teacher data")
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"[Teachers] failed to update teacher #{teacher_id}")
        raise HTTPException(status_code=500, detail="Failed to update teacher")

    return teacher
