# staffroom/api/activity_logs.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from staffroom.api.deps import get_db
from staffroom.core.config import settings
from staffroom.crud import activity_log as crud_activity_log
from staffroom.crud import teacher as crud_teacher
from staffroom.schemas.activity_log import ActivityLogOut

router = APIRouter()


# Most recent first
@router.get("", response_model=List[ActivityLogOut])
def get_activity_logs(
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    logs = crud_activity_log.get_activity_logs(db, limit or settings.ACTIVITY_LOG_DEFAULT_LIMIT)
    teachers = crud_teacher.get_teachers_by_ids(db, (log.teacher_id for log in logs))
    return [
        ActivityLogOut(
            id=log.id,
            date=log.date,
            teacher_id=log.teacher_id,
            action=log.action,
            status=log.status,
            created_at=log.created_at,
            teacher_name=teachers[log.teacher_id].name if log.teacher_id in teachers else "Unknown Teacher",
        )
        for log in logs
    ]
