# tests/conftest.py
import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="ticketlog-uploads-")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ticketlog.auth.roles import Role
from ticketlog.core.database import Base, get_db
from ticketlog.core.security import hash_password
from ticketlog.main import app
from ticketlog.user.models import User

PASSWORD = "secret123"


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSession()
    yield db
    db.close()


@pytest.fixture
def client(db_engine):
    """HTTP test client bound to a fresh in-memory database."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make(username, role=Role.TEKNISI, password=PASSWORD, **fields):
        user = User(
            username=username,
            password=hash_password(password),
            role=role,
            full_name=fields.get("full_name", username.title()),
            phone=fields.get("phone"),
            photo=fields.get("photo", "/uploads/default.png"),
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def login(client):
    def _login(username, password=PASSWORD):
        r = client.post("/login", json={"username": username, "password": password})
        assert r.status_code == 200, r.text
        return r.json()

    return _login


@pytest.fixture
def users(make_user):
    """The cast used across the suites: one user per role plus a second technician."""
    return {
        "owner": make_user("olivia", Role.OWNER),
        "alice": make_user("alice", Role.OPERATOR),
        "bob": make_user("bob", Role.TEKNISI),
        "carol": make_user("carol", Role.TEKNISI),
    }


@pytest.fixture
def create_ticket(client):
    def _create(created_by, **fields):
        data = {"aktifitas": "Fiber cut", "lokasi": "Site A", "createdBy": created_by}
        data.update(fields)
        r = client.post("/tickets", data=data)
        assert r.status_code == 201, r.text
        return r.json()["ticket"]

    return _create
