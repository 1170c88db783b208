# staffroom/db/models/substitution.py
from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from staffroom.db.base import Base

SUBSTITUTION_STATUSES = ("pending", "confirmed", "completed")


class Substitution(Base):
    __tablename__ = "substitutions"
    __table_args__ = (
        # one cover per slot of an absent teacher
        UniqueConstraint(
            "date", "period", "class", "original_teacher_id",
            name="uq_substitution_slot",
        ),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, index=True, nullable=False)
    period = Column(Integer, nullable=False)
    class_name = Column("class", String, nullable=False)
    original_teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False)
    substitute_teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False)
    status = Column(String, default="pending", nullable=False)  # pending → confirmed → completed
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    original_teacher = relationship("Teacher", foreign_keys=[original_teacher_id])
    substitute_teacher = relationship("Teacher", foreign_keys=[substitute_teacher_id])
