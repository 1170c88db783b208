import os
import tempfile

# point settings at a throwaway database before staffroom is imported
_TMP_DIR = tempfile.mkdtemp(prefix="staffroom-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["SEED_DEFAULT_PERIODS"] = "true"

import pytest
from fastapi.testclient import TestClient

from staffroom.db import Base
from staffroom.db.session import SessionLocal, engine
from staffroom.main import app


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def upload_dir():
    return os.environ["UPLOAD_DIR"]


def make_teacher(client, name, phone=None):
    resp = client.post("/api/teachers", json={"name": name, "phoneNumber": phone})
    assert resp.status_code == 201, resp.text
    return resp.json()
