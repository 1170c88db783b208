# staffroom/api/uploads.py
import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from staffroom.api.deps import get_db
from staffroom.core.config import settings
from staffroom.core.importers import CsvImportError, decode_csv, import_teachers, import_timetable
from staffroom.schemas.teacher import TeacherOut
from staffroom.schemas.upload import UploadResult

router = APIRouter()
logger = logging.getLogger(__name__)


async def _store_upload(file: UploadFile) -> Path:
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    ext = Path(file.filename or "").suffix or ".csv"
    path = upload_dir / f"{uuid.uuid4().hex}{ext}"
    path.write_bytes(await file.read())
    return path


def _remove_upload(path: Path | None) -> None:
    if path is None:
        return
    try:
        path.unlink(missing_ok=True)
    except OSError:
        logger.warning(f"[Upload] could not remove {path}")


def _import_file(importer, db: Session, path: Path):
    result = importer(db, decode_csv(path.read_bytes()))
    db.commit()
    return result


async def _run_import(file: UploadFile | None, importer, db: Session, kind: str) -> UploadResult:
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    path = None
    try:
        path = await _store_upload(file)
        result = await run_in_threadpool(_import_file, importer, db, path)
    except CsvImportError as e:
        db.rollback()
        logger.warning(f"[Upload] rejected {kind} file {file.filename}: {e}")
        raise HTTPException(status_code=400, detail=f"Invalid {kind} CSV: {e}")
    except Exception:
        db.rollback()
        logger.exception(f"[Upload] failed to import {kind} file {file.filename}")
        raise HTTPException(status_code=500, detail=f"Failed to process {kind} data")
    finally:
        _remove_upload(path)

    logger.info(f"[Upload] {file.filename}: {result.message}")
    return UploadResult(
        message=result.message,
        total=result.total,
        created=result.created,
        skipped=result.skipped,
        count=len(result.entries) if kind == "timetable" else None,
        teachers=[TeacherOut.model_validate(t) for t in result.teachers],
    )


@router.post("/teachers", response_model=UploadResult, response_model_exclude_none=True, status_code=201)
async def upload_teachers(file: UploadFile | None = File(None), db: Session = Depends(get_db)):
    return await _run_import(file, import_teachers, db, "teacher")


@router.post("/timetable", response_model=UploadResult, response_model_exclude_none=True, status_code=201)
async def upload_timetable(file: UploadFile | None = File(None), db: Session = Depends(get_db)):
    return await _run_import(file, import_timetable, db, "timetable")
