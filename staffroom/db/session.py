# staffroom/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from staffroom.core.config import settings

CONNECT_ARGS = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=CONNECT_ARGS)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db() -> None:
    # models must be registered on Base before create_all
    import staffroom.db.models  # noqa: F401
    from staffroom.db.base import Base

    Base.metadata.create_all(engine)
