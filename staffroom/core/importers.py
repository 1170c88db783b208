# staffroom/core/importers.py
"""CSV imports for the teacher roster and the weekly timetable.

Both importers are row tolerant: a bad row is counted and skipped, only a
file that cannot be read at all aborts. Neither commits; the caller owns
the transaction so a failed import leaves nothing behind.
"""
import csv
import io
import logging
import re
from dataclasses import dataclass, field
from typing import List

from sqlalchemy.orm import Session

from staffroom.core.config import settings
from staffroom.core.names import normalize_teacher_name
from staffroom.core.registry import TeacherRegistry
from staffroom.crud import timetable as crud_timetable
from staffroom.db.models.teacher import Teacher
from staffroom.db.models.timetable import TimetableEntry

logger = logging.getLogger(__name__)

DAY_COLUMN = "Day"
PERIOD_COLUMN = "Period"

_LEADING_INT_RE = re.compile(r"[+-]?\d+")


class CsvImportError(ValueError):
    """The uploaded file could not be read as CSV."""


@dataclass
class ImportResult:
    total: int = 0
    created: int = 0
    skipped: int = 0
    teachers: List[Teacher] = field(default_factory=list)
    entries: List[TimetableEntry] = field(default_factory=list)

    @property
    def message(self) -> str:
        return (
            f"Processed {self.total} records: "
            f"{self.created} created, {self.skipped} skipped"
        )


def decode_csv(content: bytes) -> str:
    try:
        # utf-8-sig drops the BOM Excel puts in front of exported CSVs
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CsvImportError(f"file is not UTF-8 text: {e}") from e


def _is_blank(row) -> bool:
    return not any((cell or "").strip() for cell in row)


def _leading_int(value: str | None) -> int | None:
    # "1.0" and "3rd" read as 1 and 3
    match = _LEADING_INT_RE.match((value or "").strip())
    return int(match.group(0)) if match else None


def import_teachers(db: Session, text: str) -> ImportResult:
    """Roster CSV: no header, column 1 name, optional column 2 phone number."""
    registry = TeacherRegistry(db)
    result = ImportResult()

    try:
        rows = [row for row in csv.reader(io.StringIO(text)) if not _is_blank(row)]
    except csv.Error as e:
        raise CsvImportError(f"malformed CSV: {e}") from e

    for row in rows:
        result.total += 1
        name = normalize_teacher_name(row[0])
        if not name or name in registry:
            result.skipped += 1
            continue
        phone_number = row[1].strip() if len(row) > 1 else None
        teacher, _ = registry.resolve(name, phone_number=phone_number or None)
        result.teachers.append(teacher)
        result.created += 1

    logger.info(f"[Import] teachers: {result.message}")
    return result


def import_timetable(db: Session, text: str, empty_marker: str | None = None) -> ImportResult:
    """Wide timetable CSV: ``Day,Period,<class>,<class>,...`` with teacher names in cells.

    Teachers named in cells but missing from the roster are created on the
    way. Entries are written in one batch once every row has been read.
    """
    marker = (empty_marker if empty_marker is not None else settings.EMPTY_CELL_MARKER).lower()
    registry = TeacherRegistry(db)
    result = ImportResult()
    pending: List[dict] = []

    reader = csv.DictReader(io.StringIO(text))
    try:
        header = reader.fieldnames
        if header is None:
            return result
        header = [(name or "").strip() for name in header]
        if DAY_COLUMN not in header or PERIOD_COLUMN not in header:
            raise CsvImportError(f"header must contain {DAY_COLUMN} and {PERIOD_COLUMN} columns")
        reader.fieldnames = header
        rows = list(reader)
    except csv.Error as e:
        raise CsvImportError(f"malformed CSV: {e}") from e

    class_columns = [name for name in header if name and name not in (DAY_COLUMN, PERIOD_COLUMN)]

    for row in rows:
        result.total += 1
        day = (row.get(DAY_COLUMN) or "").strip()
        period = _leading_int(row.get(PERIOD_COLUMN))
        if not day or period is None:
            result.skipped += 1
            continue

        for class_name in class_columns:
            cell = (row.get(class_name) or "").strip()
            if not cell or cell.lower() == marker:
                continue
            try:
                teacher, created = registry.resolve(cell)
            except ValueError:
                continue
            if created:
                result.teachers.append(teacher)
            pending.append({
                "day": day,
                "period": period,
                "class_name": class_name,
                "teacher_id": teacher.id,
            })

    result.entries = crud_timetable.bulk_create_timetable(db, pending)
    result.created = len(result.entries)
    logger.info(
        f"[Import] timetable: {result.message}, "
        f"{len(result.teachers)} new teachers"
    )
    return result
