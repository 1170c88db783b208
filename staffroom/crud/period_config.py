# staffroom/crud/period_config.py
from typing import List, Optional

from sqlalchemy.orm import Session

from staffroom.core.periods import DEFAULT_PERIODS
from staffroom.db.models.period_config import PeriodConfig


def get_period_configs(db: Session, active_only: bool = False) -> List[PeriodConfig]:
    query = db.query(PeriodConfig)
    if active_only:
        query = query.filter(PeriodConfig.active.is_(True))
    return query.order_by(PeriodConfig.period_number, PeriodConfig.id).all()


def get_period_config(db: Session, config_id: int) -> Optional[PeriodConfig]:
    return db.query(PeriodConfig).filter(PeriodConfig.id == config_id).first()


def create_period_config(db: Session, data) -> PeriodConfig:
    config = PeriodConfig(**data.model_dump())
    db.add(config)
    db.flush()
    return config


def update_period_config(db: Session, config: PeriodConfig, data) -> PeriodConfig:
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(config, field, value)
    db.flush()
    return config


def seed_default_periods(db: Session) -> int:
    """Create the default school day when no period exists yet. Returns rows added."""
    if db.query(PeriodConfig.id).first():
        return 0
    for period_number, start_time, end_time in DEFAULT_PERIODS:
        db.add(PeriodConfig(
            period_number=period_number,
            start_time=start_time,
            end_time=end_time,
            active=True,
        ))
    db.commit()
    return len(DEFAULT_PERIODS)
