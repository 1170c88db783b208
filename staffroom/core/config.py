# staffroom/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./staffroom.db"

    # uploaded CSV files are parked here while they are processed
    UPLOAD_DIR: str = "uploads"

    # timetable cell value meaning "no class in this slot"
    EMPTY_CELL_MARKER: str = "empty"

    SEED_DEFAULT_PERIODS: bool = True
    ACTIVITY_LOG_DEFAULT_LIMIT: Optional[int] = None

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://127.0.0.1",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8000",
    ]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


# single instance shared by the whole app
settings = Settings()
