# staffroom/api/deps.py
from datetime import date
from typing import Generator, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from staffroom.crud import teacher as crud_teacher
from staffroom.db.models.teacher import Teacher
from staffroom.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def resolve_date(value: Optional[date]) -> date:
    # ?date= is optional everywhere and means "today"
    return value or date.today()


def require_teacher(db: Session, teacher_id: int, status_code: int = 404) -> Teacher:
    teacher = crud_teacher.get_teacher(db, teacher_id)
    if not teacher:
        detail = "Teacher not found" if status_code == 404 else f"Unknown teacher id {teacher_id}"
        raise HTTPException(status_code=status_code, detail=detail)
    return teacher
