# staffroom/db/models/activity_log.py
from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from staffroom.db.base import Base


class ActivityLog(Base):
    __tablename__ = "activity_logs"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=False)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False)
    action = Column(String, nullable=False)  # "Marked absent", "SMS Sent"
    status = Column(String, nullable=False)  # "Completed", "Assigned", "Delivered"
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True, nullable=False)
