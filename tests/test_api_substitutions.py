import pytest

from tests.conftest import make_teacher

# a Monday
DAY = "2025-03-10"


@pytest.fixture
def staff(client):
    jane = make_teacher(client, "Jane Doe")
    alan = make_teacher(client, "Alan Turing")
    ada = make_teacher(client, "Ada Lovelace")
    csv = (
        "Day,Period,10A,10B\n"
        "Monday,1,Jane Doe,Alan Turing\n"
        "Monday,3,Jane Doe,empty\n"
        "Tuesday,1,Ada Lovelace,Jane Doe\n"
    )
    resp = client.post("/api/upload/timetable", files={"file": ("tt.csv", csv.encode(), "text/csv")})
    assert resp.status_code == 201
    client.post("/api/attendance", json={"teacherId": jane["id"], "date": DAY, "status": "absent"})
    return jane, alan, ada


def assign(client, original, substitute, period=3, class_name="10A", day=DAY):
    return client.post("/api/substitutions", json={
        "date": day,
        "period": period,
        "class": class_name,
        "originalTeacherId": original["id"],
        "substituteTeacherId": substitute["id"],
        "status": "pending",
    })


def test_create_substitution(client, staff):
    jane, alan, _ = staff
    resp = assign(client, jane, alan)
    assert resp.status_code == 201
    sub = resp.json()
    assert sub["class"] == "10A"
    assert sub["period"] == 3
    assert sub["status"] == "pending"
    assert sub["originalTeacherName"] == "Jane Doe"
    assert sub["substituteTeacherName"] == "Alan Turing"

    listed = client.get("/api/substitutions", params={"date": DAY}).json()
    assert [s["id"] for s in listed] == [sub["id"]]
    assert client.get("/api/substitutions", params={"date": "2025-03-11"}).json() == []


def test_substitution_logs_activity_for_substitute(client, staff):
    jane, alan, _ = staff
    assign(client, jane, alan)
    log = client.get("/api/activity-logs", params={"limit": 1}).json()[0]
    assert log["action"] == "Substituted Class 10A"
    assert log["status"] == "Assigned"
    assert log["teacherId"] == alan["id"]


def test_same_slot_cannot_be_covered_twice(client, staff):
    jane, alan, ada = staff
    assert assign(client, jane, alan).status_code == 201

    resp = assign(client, jane, ada)
    assert resp.status_code == 409
    assert len(client.get("/api/substitutions", params={"date": DAY}).json()) == 1

    # a different class in the same period is a different slot
    assert assign(client, jane, ada, period=1, class_name="10A").status_code == 201


def test_substitution_validation(client, staff):
    jane, alan, _ = staff
    resp = client.post("/api/substitutions", json={"date": DAY, "period": 3})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid substitution data"}

    resp = assign(client, jane, jane)
    assert resp.status_code == 400

    resp = assign(client, jane, {"id": 999})
    assert resp.status_code == 400


def test_absence_overview(client, staff):
    jane, alan, _ = staff
    assign(client, jane, alan, period=1, class_name="10A")

    resp = client.get("/api/absences", params={"date": DAY})
    assert resp.status_code == 200
    overview = resp.json()
    assert overview["day"] == "Monday"
    assert overview["date"] == DAY
    assert len(overview["absentTeachers"]) == 1

    absent = overview["absentTeachers"][0]
    assert absent["teacherId"] == jane["id"]
    assert absent["classes"] == [
        {"period": 1, "class": "10A", "hasSubstitute": True},
        {"period": 3, "class": "10A", "hasSubstitute": False},
    ]


def test_no_absences(client):
    make_teacher(client, "Jane Doe")
    overview = client.get("/api/absences", params={"date": DAY}).json()
    assert overview["absentTeachers"] == []


def test_available_substitutes(client, staff):
    jane, alan, ada = staff
    assign(client, jane, alan, period=1, class_name="10A")

    resp = client.get("/api/substitutions/available", params={"date": DAY, "period": 1, "teacherId": jane["id"]})
    assert [t["id"] for t in resp.json()] == [ada["id"]]

    resp = client.get("/api/substitutions/available", params={"date": DAY, "period": 3, "teacherId": jane["id"]})
    assert sorted(t["id"] for t in resp.json()) == sorted([alan["id"], ada["id"]])


def test_update_substitution_status(client, staff):
    jane, alan, ada = staff
    sub = assign(client, jane, alan).json()

    resp = client.patch(f"/api/substitutions/{sub['id']}", json={"status": "confirmed"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "confirmed"

    resp = client.patch(f"/api/substitutions/{sub['id']}", json={"substituteTeacherId": ada["id"]})
    assert resp.json()["substituteTeacherName"] == "Ada Lovelace"

    assert client.patch("/api/substitutions/999", json={"status": "completed"}).status_code == 404
    assert client.patch(f"/api/substitutions/{sub['id']}", json={"status": "done"}).status_code == 400


def test_substitution_message(client, staff):
    jane, alan, _ = staff
    sub = assign(client, jane, alan).json()

    resp = client.get(f"/api/substitutions/{sub['id']}/message")
    assert resp.status_code == 200
    body = resp.json()
    assert body["teacherId"] == alan["id"]
    assert body["message"].startswith("Dear Alan Turing, You have been assigned as a substitute for 10A")
    assert "Period 3 on March 10, 2025" in body["message"]
