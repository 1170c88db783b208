# staffroom/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from staffroom.api import (
    activity_logs,
    attendance,
    messages,
    periods,
    substitutions,
    teachers,
    timetable,
    uploads,
)
from staffroom.core.config import settings
from staffroom.core.logging import setup_logging
from staffroom.crud.period_config import seed_default_periods
from staffroom.db.session import SessionLocal, init_db

setup_logging()
logger = logging.getLogger(__name__)

# generic 400 detail per resource; field errors are not echoed back
VALIDATION_DETAILS = {
    "/api/teachers": "Invalid teacher data",
    "/api/attendance": "Invalid attendance data",
    "/api/timetable": "Invalid timetable data",
    "/api/substitutions": "Invalid substitution data",
    "/api/absences": "Invalid absence query",
    "/api/periods": "Invalid period configuration data",
    "/api/activity-logs": "Invalid activity log query",
    "/api/messages": "Invalid message data",
    "/api/upload": "Invalid upload",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.SEED_DEFAULT_PERIODS:
        db = SessionLocal()
        try:
            if seed_default_periods(db):
                logger.info("[Startup] initialized default period configurations")
        finally:
            db.close()
    yield


app = FastAPI(title="Staffroom", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    path = request.url.path
    detail = next(
        (text for prefix, text in VALIDATION_DETAILS.items() if path.startswith(prefix)),
        "Invalid request data",
    )
    logger.info(f"[API] {request.method} {path} rejected: {len(exc.errors())} validation errors")
    return JSONResponse(status_code=400, content={"detail": detail})


app.include_router(teachers.router, prefix="/api/teachers", tags=["teachers"])
app.include_router(attendance.router, prefix="/api/attendance", tags=["attendance"])
app.include_router(timetable.router, prefix="/api/timetable", tags=["timetable"])
app.include_router(substitutions.router, prefix="/api/substitutions", tags=["substitutions"])
app.include_router(substitutions.absences_router, prefix="/api/absences", tags=["substitutions"])
app.include_router(periods.router, prefix="/api/periods", tags=["periods"])
app.include_router(activity_logs.router, prefix="/api/activity-logs", tags=["activity"])
app.include_router(messages.router, prefix="/api/messages", tags=["messages"])
app.include_router(uploads.router, prefix="/api/upload", tags=["upload"])


@app.get("/api/health")
def health():
    return {"status": "ok"}
