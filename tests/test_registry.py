import pytest

from staffroom.core.registry import TeacherRegistry
from staffroom.crud import teacher as crud_teacher


def test_variants_resolve_to_one_teacher(db):
    registry = TeacherRegistry(db)
    first, created = registry.resolve(" jane DOE ")
    assert created

    for variant in ("Jane Doe", "JANE   DOE", "jane doe"):
        teacher, created = registry.resolve(variant)
        assert not created
        assert teacher.id == first.id

    db.commit()
    assert len(crud_teacher.get_teachers(db)) == 1


def test_new_teacher_gets_initials_and_next_id(db):
    registry = TeacherRegistry(db)
    a, _ = registry.resolve("jane doe")
    b, _ = registry.resolve("mr john smith")
    assert a.initials == "JD"
    assert b.name == "Mr John Smith"
    assert b.initials == "MJS"
    assert b.id > a.id


def test_known_teacher_keeps_first_phone_number(db):
    registry = TeacherRegistry(db)
    registry.resolve("Jane Doe", phone_number="0700 000 001")
    teacher, created = registry.resolve("JANE DOE", phone_number="0700 999 999")
    assert not created
    assert teacher.phone_number == "0700 000 001"


def test_snapshot_sees_existing_teachers(db):
    crud_teacher.create_teacher(db, "Alan Turing")
    db.commit()

    registry = TeacherRegistry(db)
    assert "alan   TURING" in registry
    teacher, created = registry.resolve("alan turing")
    assert not created
    assert teacher.name == "Alan Turing"


def test_empty_name_is_rejected(db):
    registry = TeacherRegistry(db)
    with pytest.raises(ValueError):
        registry.resolve("   ")
    assert crud_teacher.get_teachers(db) == []
