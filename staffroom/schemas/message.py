# staffroom/schemas/message.py
import datetime
from typing import Literal, Optional

from staffroom.schemas.base import CamelModel

MessageStatus = Literal["pending", "sent", "delivered", "failed"]


class MessageCreate(CamelModel):
    teacher_id: int
    message: str
    date: datetime.date
    status: MessageStatus = "pending"


class MessageUpdate(CamelModel):
    status: MessageStatus


class MessageOut(CamelModel):
    id: int
    teacher_id: int
    message: str
    date: datetime.date
    status: MessageStatus
    created_at: datetime.datetime
    teacher_name: str = "Unknown Teacher"
    phone_number: Optional[str] = None


class MessageTemplateOut(CamelModel):
    id: str
    name: str
    template: str
