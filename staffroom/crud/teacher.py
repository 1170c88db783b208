# staffroom/crud/teacher.py
from typing import List, Optional

from sqlalchemy.orm import Session

from staffroom.core.names import generate_initials, name_key, normalize_teacher_name
from staffroom.db.models.teacher import Teacher


def get_teachers(db: Session) -> List[Teacher]:
    return db.query(Teacher).order_by(Teacher.id).all()


def get_teacher(db: Session, teacher_id: int) -> Optional[Teacher]:
    return db.query(Teacher).filter(Teacher.id == teacher_id).first()


def get_teacher_by_name(db: Session, name: str) -> Optional[Teacher]:
    return db.query(Teacher).filter(Teacher.name_key == name_key(name)).first()


def get_teachers_by_ids(db: Session, teacher_ids) -> dict:
    ids = set(teacher_ids)
    if not ids:
        return {}
    return {t.id: t for t in db.query(Teacher).filter(Teacher.id.in_(ids)).all()}


def create_teacher(
    db: Session,
    name: str,
    phone_number: Optional[str] = None,
    initials: Optional[str] = None,
) -> Teacher:
    normalized = normalize_teacher_name(name)
    if not normalized:
        raise ValueError("teacher name is empty")
    teacher = Teacher(
        name=normalized,
        name_key=normalized.lower(),
        phone_number=phone_number or None,
        initials=initials or generate_initials(normalized),
    )
    db.add(teacher)
    db.flush()
    return teacher


def update_teacher(
    db: Session,
    teacher: Teacher,
    name: Optional[str] = None,
    phone_number: Optional[str] = None,
) -> Teacher:
    if name is not None:
        normalized = normalize_teacher_name(name)
        if not normalized:
            raise ValueError("teacher name is empty")
        teacher.name = normalized
        teacher.name_key = normalized.lower()
        teacher.initials = generate_initials(normalized)
    if phone_number is not None:
        teacher.phone_number = phone_number.strip() or None
    db.flush()
    return teacher
