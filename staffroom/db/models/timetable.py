# staffroom/db/models/timetable.py
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from staffroom.db.base import Base


class TimetableEntry(Base):
    """A weekly recurring slot: (day, period, class) taught by one teacher."""

    __tablename__ = "timetable"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    day = Column(String, index=True, nullable=False)  # "Monday"
    period = Column(Integer, nullable=False)
    class_name = Column("class", String, nullable=False)  # "10A"
    teacher_id = Column(Integer, ForeignKey("teachers.id"), index=True, nullable=False)

    teacher = relationship("Teacher")
