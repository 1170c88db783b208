# staffroom/db/models/period_config.py
from sqlalchemy import Boolean, Column, Integer, String

from staffroom.db.base import Base


class PeriodConfig(Base):
    __tablename__ = "period_configs"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    period_number = Column(Integer, nullable=False)
    start_time = Column(String, nullable=False)  # "08:00"
    end_time = Column(String, nullable=False)  # "08:45"
    active = Column(Boolean, default=True, nullable=False)
