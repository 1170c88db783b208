# staffroom/db/models/teacher.py
from sqlalchemy import Column, Integer, String

from staffroom.db.base import Base


class Teacher(Base):
    __tablename__ = "teachers"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # lower-cased normalized name, one teacher per key
    name_key = Column(String, unique=True, index=True, nullable=False)
    phone_number = Column(String, nullable=True)
    initials = Column(String, nullable=False)
