# staffroom/api/messages.py
import logging
from typing import List, Union

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from staffroom.api.deps import get_db
from staffroom.core.sms import MESSAGE_TEMPLATES
from staffroom.crud import activity_log as crud_activity_log
from staffroom.crud import message as crud_message
from staffroom.crud import teacher as crud_teacher
from staffroom.schemas.message import MessageCreate, MessageOut, MessageTemplateOut, MessageUpdate

router = APIRouter()
logger = logging.getLogger(__name__)


def message_out(message, teachers: dict) -> MessageOut:
    teacher = teachers.get(message.teacher_id)
    return MessageOut(
        id=message.id,
        teacher_id=message.teacher_id,
        message=message.message,
        date=message.date,
        status=message.status,
        created_at=message.created_at,
        teacher_name=teacher.name if teacher else "Unknown Teacher",
        phone_number=teacher.phone_number if teacher else None,
    )


@router.get("", response_model=List[MessageOut])
def list_messages(db: Session = Depends(get_db)):
    messages = crud_message.get_messages(db)
    teachers = crud_teacher.get_teachers_by_ids(db, (m.teacher_id for m in messages))
    return [message_out(m, teachers) for m in messages]


@router.get("/templates", response_model=List[MessageTemplateOut])
def list_templates():
    return MESSAGE_TEMPLATES


# Accepts one message object or an array of them
@router.post("", response_model=Union[List[MessageOut], MessageOut], status_code=201)
def create_messages(
    payload: Union[List[MessageCreate], MessageCreate],
    db: Session = Depends(get_db),
):
    batch = payload if isinstance(payload, list) else [payload]
    teachers = crud_teacher.get_teachers_by_ids(db, (m.teacher_id for m in batch))
    missing = sorted({m.teacher_id for m in batch} - set(teachers))
    if missing:
        raise HTTPException(status_code=400, detail=f"Unknown teacher ids: {missing}")

    try:
        created = []
        for data in batch:
            message = crud_message.create_message(db, data)
            crud_activity_log.create_activity_log(
                db,
                day=message.date,
                teacher_id=message.teacher_id,
                action="SMS Sent",
                status="Delivered",
            )
            created.append(message)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[SMS] failed to store messages")
        raise HTTPException(status_code=500, detail="Failed to create messages")

    for message in created:
        teacher = teachers[message.teacher_id]
        # no gateway: the message is only recorded
        logger.info(f"[SMS] to {teacher.name} <{teacher.phone_number or 'no phone'}>: {message.message}")

    results = [message_out(m, teachers) for m in created]
    return results if isinstance(payload, list) else results[0]


@router.patch("/{message_id}", response_model=MessageOut)
def update_message(message_id: int, message_in: MessageUpdate, db: Session = Depends(get_db)):
    message = crud_message.get_message(db, message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")

    try:
        message.status = message_in.status
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"[SMS] failed to update message #{message_id}")
        raise HTTPException(status_code=500, detail="Failed to update message")

    return message_out(message, crud_teacher.get_teachers_by_ids(db, [message.teacher_id]))
