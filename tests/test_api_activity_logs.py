from tests.conftest import make_teacher

DAY = "2025-03-10"


def test_most_recent_first_and_limit(client):
    jane = make_teacher(client, "Jane Doe")
    for status in ("absent", "present", "absent"):
        resp = client.post("/api/attendance", json={"teacherId": jane["id"], "date": DAY, "status": status})
        assert resp.status_code == 201

    resp = client.post("/api/attendance", json={"teacherId": jane["id"], "date": DAY, "status": "late"})
    assert resp.status_code == 400

    logs = client.get("/api/activity-logs").json()
    assert [log["action"] for log in logs] == ["Marked absent", "Marked present", "Marked absent"]
    assert all(log["status"] == "Completed" for log in logs)

    limited = client.get("/api/activity-logs", params={"limit": 2}).json()
    assert [log["id"] for log in limited] == [log["id"] for log in logs[:2]]

    assert client.get("/api/activity-logs", params={"limit": 0}).status_code == 400


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
