# staffroom/crud/activity_log.py
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from staffroom.db.models.activity_log import ActivityLog


def get_activity_logs(db: Session, limit: Optional[int] = None) -> List[ActivityLog]:
    query = db.query(ActivityLog).order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


def create_activity_log(db: Session, day: date, teacher_id: int, action: str, status: str) -> ActivityLog:
    log = ActivityLog(date=day, teacher_id=teacher_id, action=action, status=status)
    db.add(log)
    db.flush()
    return log
