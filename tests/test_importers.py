import pytest

from staffroom.core.importers import CsvImportError, decode_csv, import_teachers, import_timetable
from staffroom.crud import teacher as crud_teacher
from staffroom.crud import timetable as crud_timetable


TIMETABLE_CSV = """Day,Period,10A,10B,11C
Monday,1,jane doe,Mr smith,empty
Monday,2,Jane Doe,,alan turing
,3,jane doe,mr smith,alan turing
Monday,x,jane doe,mr smith,alan turing
Tuesday,1,JANE   DOE,EMPTY,Alan Turing
"""


def test_roster_import(db):
    text = "jane doe,0700 000 001\nMr smith\n\nJANE DOE,0999\n , 0123\nalan turing,  \n"
    result = import_teachers(db, text)
    db.commit()

    assert result.total == 5
    assert result.created == 3
    # duplicate jane + blank name
    assert result.skipped == 2
    assert [t.name for t in result.teachers] == ["Jane Doe", "Mr Smith", "Alan Turing"]

    jane = crud_teacher.get_teacher_by_name(db, "jane doe")
    assert jane.phone_number == "0700 000 001"
    assert jane.initials == "JD"
    assert crud_teacher.get_teacher_by_name(db, "alan turing").phone_number is None


def test_roster_import_skips_known_teachers(db):
    crud_teacher.create_teacher(db, "Jane Doe", phone_number="1")
    db.commit()

    result = import_teachers(db, "jane doe,2\nmr smith,3\n")
    assert result.created == 1
    assert result.skipped == 1
    assert crud_teacher.get_teacher_by_name(db, "jane doe").phone_number == "1"


def test_timetable_import(db):
    result = import_timetable(db, TIMETABLE_CSV)
    db.commit()

    assert result.total == 5
    assert result.skipped == 2
    # Monday/1: 2 cells, Monday/2: 2 cells, Tuesday/1: 2 cells
    assert result.created == 6
    assert sorted(t.name for t in result.teachers) == ["Alan Turing", "Jane Doe", "Mr Smith"]
    assert len(crud_teacher.get_teachers(db)) == 3

    monday = crud_timetable.get_timetable(db, day="monday")
    assert [(e.period, e.class_name) for e in monday] == [(1, "10A"), (1, "10B"), (2, "10A"), (2, "11C")]
    jane = crud_teacher.get_teacher_by_name(db, "jane doe")
    assert {e.teacher_id for e in monday if e.class_name == "10A"} == {jane.id}


def test_timetable_import_counts_rows_with_empty_day(db):
    rows = ["Day,Period,10A"]
    for i in range(10):
        day = "" if i in (3, 7) else "Wednesday"
        rows.append(f"{day},{i % 8 + 1},Teacher {i}")
    text = "\n".join(rows) + "\n"

    result = import_timetable(db, text)

    assert result.total == 10
    assert result.skipped == 2
    assert result.created == 8


def test_timetable_bulk_ids_strictly_increase(db):
    import_timetable(db, "Day,Period,10A\nMonday,1,jane doe\n")
    db.commit()

    result = import_timetable(db, TIMETABLE_CSV)
    db.commit()

    ids = [e.id for e in result.entries]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)
    assert ids[0] > 1


def test_timetable_reuses_roster_teachers(db):
    import_teachers(db, "Jane Doe,0700\n")
    db.commit()

    result = import_timetable(db, "Day,Period,10A\nMonday,1,  jane   DOE \n")
    assert result.teachers == []
    assert result.created == 1
    assert len(crud_teacher.get_teachers(db)) == 1


def test_timetable_custom_empty_marker(db):
    result = import_timetable(db, "Day,Period,10A,10B\nMonday,1,-,jane doe\n", empty_marker="-")
    assert result.created == 1


def test_timetable_header_is_trimmed(db):
    result = import_timetable(db, " Day , Period , 10A \nMonday,1,jane doe\n")
    assert result.created == 1
    assert result.entries[0].class_name == "10A"


def test_timetable_without_day_column_is_rejected(db):
    with pytest.raises(CsvImportError):
        import_timetable(db, "Weekday,Period,10A\nMonday,1,jane doe\n")


def test_empty_timetable_file(db):
    result = import_timetable(db, "")
    assert (result.total, result.created, result.skipped) == (0, 0, 0)


def test_decode_csv():
    assert decode_csv("\ufeffDay,Period\n".encode("utf-8")) == "Day,Period\n"
    with pytest.raises(CsvImportError):
        decode_csv(b"\xff\xfe\x00bad")


def test_timetable_period_reads_leading_integer(db):
    result = import_timetable(db, "Day,Period,10A\nMonday,1.0,jane doe\nMonday,3rd,jane doe\nMonday,P4,jane doe\n")
    assert (result.total, result.created, result.skipped) == (3, 2, 1)
    assert [e.period for e in result.entries] == [1, 3]
