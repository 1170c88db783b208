# staffroom/core/registry.py
import logging
from typing import Dict, Optional, Tuple

from sqlalchemy.orm import Session

from staffroom.core.names import generate_initials, normalize_teacher_name
from staffroom.crud import teacher as crud_teacher
from staffroom.db.models.teacher import Teacher

logger = logging.getLogger(__name__)


class TeacherRegistry:
    """Resolve-or-create teachers by normalized name.

    Loads every teacher once and keeps the snapshot current as it creates
    new ones, so a whole import costs a single SELECT. The UNIQUE index on
    ``teachers.name_key`` backs the in-memory check.
    """

    def __init__(self, db: Session):
        self.db = db
        self._by_key: Dict[str, Teacher] = {
            teacher.name_key: teacher for teacher in crud_teacher.get_teachers(db)
        }

    def __contains__(self, raw_name: str) -> bool:
        return normalize_teacher_name(raw_name).lower() in self._by_key

    def get(self, raw_name: str) -> Optional[Teacher]:
        return self._by_key.get(normalize_teacher_name(raw_name).lower())

    def resolve(self, raw_name: str, phone_number: Optional[str] = None) -> Tuple[Teacher, bool]:
        """Return ``(teacher, created)``.

        A known teacher is returned untouched: a different phone number in
        the source is ignored.
        """
        name = normalize_teacher_name(raw_name)
        if not name:
            raise ValueError("teacher name is empty")

        key = name.lower()
        existing = self._by_key.get(key)
        if existing is not None:
            return existing, False

        teacher = crud_teacher.create_teacher(
            self.db,
            name=name,
            phone_number=phone_number,
            initials=generate_initials(name),
        )
        self._by_key[key] = teacher
        logger.info(f"[Registry] new teacher #{teacher.id}: {teacher.name} ({teacher.initials})")
        return teacher, True
