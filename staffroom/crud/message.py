# staffroom/crud/message.py
from typing import List, Optional

from sqlalchemy.orm import Session

from staffroom.db.models.message import Message


def get_messages(db: Session) -> List[Message]:
    return db.query(Message).order_by(Message.id).all()


def get_message(db: Session, message_id: int) -> Optional[Message]:
    return db.query(Message).filter(Message.id == message_id).first()


def create_message(db: Session, data) -> Message:
    message = Message(
        teacher_id=data.teacher_id,
        message=data.message,
        date=data.date,
        status=data.status,
    )
    db.add(message)
    db.flush()
    return message
