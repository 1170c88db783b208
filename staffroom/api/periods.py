# staffroom/api/periods.py
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from staffroom.api.deps import get_db
from staffroom.core.periods import parse_clock, resolve_period_status
from staffroom.crud import period_config as crud_period
from staffroom.schemas.period import (
    TIME_PATTERN,
    PeriodConfigCreate,
    PeriodConfigOut,
    PeriodConfigUpdate,
    PeriodStatusOut,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _period_out(config) -> Optional[PeriodConfigOut]:
    return PeriodConfigOut.model_validate(config) if config is not None else None


@router.get("", response_model=List[PeriodConfigOut])
def list_periods(db: Session = Depends(get_db)):
    return crud_period.get_period_configs(db)


@router.post("", response_model=PeriodConfigOut, status_code=201)
def create_period(period_in: PeriodConfigCreate, db: Session = Depends(get_db)):
    if parse_clock(period_in.start_time) > parse_clock(period_in.end_time):
        raise HTTPException(status_code=400, detail="Invalid period configuration data")

    try:
        config = crud_period.create_period_config(db, period_in)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[Periods] failed to create period")
        raise HTTPException(status_code=500, detail="Failed to create period configuration")
    return config


# Where are we in the school day? ?time=HH:MM, defaults to the server clock
@router.get("/status", response_model=PeriodStatusOut)
def get_period_status(
    time: Optional[str] = Query(None, pattern=TIME_PATTERN),
    db: Session = Depends(get_db),
):
    clock = time or datetime.now().strftime("%H:%M")
    periods = crud_period.get_period_configs(db)
    status = resolve_period_status(periods, parse_clock(clock))
    return PeriodStatusOut(
        time=clock,
        state=status.state,
        label=status.label,
        period=_period_out(status.period),
        next_period=_period_out(status.next_period),
        configured=len(periods),
    )


@router.post("/{period_id}", response_model=PeriodConfigOut)
def update_period(period_id: int, period_in: PeriodConfigUpdate, db: Session = Depends(get_db)):
    config = crud_period.get_period_config(db, period_id)
    if not config:
        raise HTTPException(status_code=404, detail="Period not found")

    start = period_in.start_time or config.start_time
    end = period_in.end_time or config.end_time
    if parse_clock(start) > parse_clock(end):
        raise HTTPException(status_code=400, detail="Invalid period configuration data")

    try:
        crud_period.update_period_config(db, config, period_in)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"[Periods] failed to update period #{period_id}")
        raise HTTPException(status_code=500, detail="Failed to update period configuration")
    return config
