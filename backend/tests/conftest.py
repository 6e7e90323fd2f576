import os

os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.config import settings
from app.core.security import create_access_token
from app.db.base import Base
from app.db.models.user import User
from app.db.session import SessionLocal, engine

DEADLINE = "2030-01-31T12:00:00Z"


@pytest.fixture(autouse=True)
def _tables(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "EXPORT_DIR", str(tmp_path / "exports"))
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client():
    return TestClient(app)


def _user(db, login, role, **names) -> User:
    u = User(login=login, password_hash="!", role=role, **names)
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def org(db):
    return _user(db, "acme@example.com", "organization", company_name="Acme Ltd")


@pytest.fixture
def dev(db):
    return _user(db, "ada@example.com", "developer", first_name="Ada", last_name="Lovelace")


@pytest.fixture
def dev2(db):
    return _user(db, "linus@example.com", "developer", first_name="Linus", last_name="Torvalds")


@pytest.fixture
def student(db):
    return _user(db, "sam@example.com", "student", first_name="Sam", last_name="Student")


def _auth(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def auth():
    return _auth


@pytest.fixture
def make_project(client):
    def _make(user, **overrides):
        body = {
            "title": "Landing page",
            "description": "Build a landing page",
            "skills": ["react", "css"],
            "budget": 8000,
            "deadline": DEADLINE,
        }
        body.update(overrides)
        r = client.post("/projects", json=body, headers=_auth(user))
        assert r.status_code == 201, r.text
        return r.json()
    return _make


@pytest.fixture
def bid_on(client):
    def _bid(user, project_id, amount=5000, proposal="I can do it"):
        r = client.post(f"/projects/{project_id}/bids", json={"amount": amount, "proposal": proposal}, headers=_auth(user))
        assert r.status_code == 201, r.text
        return r.json()["bid"]
    return _bid
