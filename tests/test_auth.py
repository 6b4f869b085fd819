# tests/test_auth.py
from datetime import timedelta

from ticketlog.auth.models import UserSession
from ticketlog.auth.roles import Role
from ticketlog.core.database import utcnow
from ticketlog.user.models import User


def test_login_sets_session_and_redirects_by_role(client, users, login):
    body = login("olivia")
    assert body["message"] == "Login successful"
    assert body["redirect"] == "/dashboard.html"
    assert body["user"]["username"] == "olivia"
    assert body["user"]["role"] == "Owner"
    assert "password" not in body["user"]
    assert client.cookies.get("session_id")

    assert login("bob")["redirect"] == "/activity.html"


def test_login_rejects_bad_credentials(client, users):
    r = client.post("/login", json={"username": "bob", "password": "wrong-password"})
    assert r.status_code == 401
    assert r.json()["message"] == "Login failed: Invalid username or password"

    r = client.post("/login", json={"username": "nobody", "password": "secret123"})
    assert r.status_code == 401


def test_logout_ends_session(client, users, login):
    login("bob")
    assert client.get("/tickets").status_code == 200

    r = client.post("/logout")
    assert r.status_code == 200
    assert r.json()["redirect"] == "/index.html"
    assert client.get("/tickets").status_code == 401


def test_logout_without_session(client):
    assert client.post("/logout").status_code == 200


def test_unknown_or_expired_session_is_anonymous(client, users, db_session):
    client.cookies.set("session_id", "not-a-real-token")
    assert client.get("/tickets").status_code == 401

    now = utcnow()
    db_session.add(
        UserSession(
            token="stale-token",
            username="bob",
            created_at=now - timedelta(days=2),
            expires_at=now - timedelta(days=1),
        )
    )
    db_session.commit()
    client.cookies.set("session_id", "stale-token")
    assert client.get("/tickets").status_code == 401


def test_login_purges_expired_sessions(client, users, login, db_session):
    now = utcnow()
    db_session.add(UserSession(token="old", username="bob", created_at=now, expires_at=now - timedelta(seconds=1)))
    db_session.commit()

    login("bob")
    assert db_session.query(UserSession).filter_by(token="old").count() == 0


def test_register_public_defaults_to_teknisi(client, db_session):
    r = client.post(
        "/register",
        data={"username": "dina", "password": "hunter22", "fullName": "Dina S", "phone": "0812"},
    )
    assert r.status_code == 201
    assert r.json()["redirect"] == "/index.html"

    user = db_session.query(User).filter_by(username="dina").one()
    assert user.role is Role.TEKNISI
    assert user.photo == "/uploads/default.png"
    assert user.password != "hunter22"

    r = client.post("/login", json={"username": "dina", "password": "hunter22"})
    assert r.status_code == 200


def test_register_with_photo(client, db_session):
    r = client.post(
        "/register",
        data={"username": "edo", "password": "hunter22"},
        files={"photo": ("me.jpg", b"jpeg-bytes", "image/jpeg")},
    )
    assert r.status_code == 201
    photo = db_session.query(User).filter_by(username="edo").one().photo
    assert photo.startswith("/uploads/") and photo.endswith("-me.jpg")


def test_register_privileged_role_requires_owner(client, users, login):
    r = client.post("/register", data={"username": "mallory", "password": "hunter22", "role": "Owner"})
    assert r.status_code == 403

    login("alice")
    r = client.post("/register", data={"username": "mallory", "password": "hunter22", "role": "Operator"})
    assert r.status_code == 403

    login("olivia")
    r = client.post("/register", data={"username": "oscar", "password": "hunter22", "role": "Operator"})
    assert r.status_code == 201
    assert client.get("/users/oscar").json()["role"] == "Operator"


def test_register_validation(client, users):
    # duplicate
    r = client.post("/register", data={"username": "bob", "password": "hunter22"})
    assert r.status_code == 400
    assert r.json()["message"] == "Username already exists"

    # short username / password
    assert client.post("/register", data={"username": "ab", "password": "hunter22"}).status_code == 400
    assert client.post("/register", data={"username": "abcd", "password": "123"}).status_code == 400

    # not a role
    r = client.post("/register", data={"username": "abcd", "password": "hunter22", "role": "Admin"})
    assert r.status_code == 400
