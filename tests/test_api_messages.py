from tests.conftest import make_teacher

DAY = "2025-03-10"


def test_create_single_and_batch(client):
    jane = make_teacher(client, "Jane Doe", "555-0100")
    alan = make_teacher(client, "Alan Turing")

    resp = client.post("/api/messages", json={"teacherId": jane["id"], "message": "Hello", "date": DAY})
    assert resp.status_code == 201
    single = resp.json()
    assert isinstance(single, dict)
    assert single["status"] == "pending"
    assert single["teacherName"] == "Jane Doe"
    assert single["phoneNumber"] == "555-0100"

    resp = client.post("/api/messages", json=[
        {"teacherId": jane["id"], "message": "One", "date": DAY, "status": "sent"},
        {"teacherId": alan["id"], "message": "Two", "date": DAY},
    ])
    assert resp.status_code == 201
    batch = resp.json()
    assert [m["message"] for m in batch] == ["One", "Two"]

    listed = client.get("/api/messages").json()
    assert len(listed) == 3
    assert {m["teacherName"] for m in listed} == {"Jane Doe", "Alan Turing"}


def test_messages_write_activity(client):
    jane = make_teacher(client, "Jane Doe")
    client.post("/api/messages", json={"teacherId": jane["id"], "message": "Hello", "date": DAY})
    logs = client.get("/api/activity-logs").json()
    assert [(log["action"], log["status"], log["teacherName"]) for log in logs] == [
        ("SMS Sent", "Delivered", "Jane Doe"),
    ]


def test_invalid_messages(client):
    jane = make_teacher(client, "Jane Doe")
    resp = client.post("/api/messages", json={"teacherId": jane["id"], "date": DAY})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid message data"}

    resp = client.post("/api/messages", json=[
        {"teacherId": jane["id"], "message": "ok", "date": DAY},
        {"teacherId": 999, "message": "nobody", "date": DAY},
    ])
    assert resp.status_code == 400
    assert client.get("/api/messages").json() == []


def test_update_message_status(client):
    jane = make_teacher(client, "Jane Doe")
    msg = client.post("/api/messages", json={"teacherId": jane["id"], "message": "Hello", "date": DAY}).json()

    resp = client.patch(f"/api/messages/{msg['id']}", json={"status": "delivered"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "delivered"
    assert client.patch("/api/messages/999", json={"status": "sent"}).status_code == 404


def test_templates(client):
    templates = client.get("/api/messages/templates").json()
    assert [t["id"] for t in templates] == ["substitute", "meeting", "schedule", "custom"]
    assert "[Teacher Name]" in templates[0]["template"]
