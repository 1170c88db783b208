# staffroom/crud/substitution.py
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from staffroom.db.models.substitution import Substitution


def get_substitutions(db: Session, day: Optional[date] = None) -> List[Substitution]:
    query = db.query(Substitution)
    if day is not None:
        query = query.filter(Substitution.date == day)
    return query.order_by(Substitution.period, Substitution.id).all()


def get_substitution(db: Session, substitution_id: int) -> Optional[Substitution]:
    return db.query(Substitution).filter(Substitution.id == substitution_id).first()


def find_substitution_for_slot(
    db: Session,
    day: date,
    period: int,
    class_name: str,
    original_teacher_id: int,
) -> Optional[Substitution]:
    return db.query(Substitution).filter(
        Substitution.date == day,
        Substitution.period == period,
        Substitution.class_name == class_name,
        Substitution.original_teacher_id == original_teacher_id,
    ).first()


def create_substitution(db: Session, data) -> Substitution:
    substitution = Substitution(
        date=data.date,
        period=data.period,
        class_name=data.class_name,
        original_teacher_id=data.original_teacher_id,
        substitute_teacher_id=data.substitute_teacher_id,
        status=data.status,
    )
    db.add(substitution)
    db.flush()
    return substitution


def update_substitution(db: Session, substitution: Substitution, data) -> Substitution:
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(substitution, field, value)
    db.flush()
    return substitution
