from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import jwt

from terraweave import config, models
from terraweave.database import get_db
from terraweave.security import create_access_token


def login(client, email=None, password=None):
    payload = {}
    if email is not None:
        payload["email"] = email
    if password is not None:
        payload["password"] = password
    return client.post("/api/auth/login", json=payload)


def test_login_issues_token(client, db):
    r = login(client, config.ADMIN_EMAIL, config.ADMIN_PASSWORD)
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["user"]["email"] == config.ADMIN_EMAIL
    assert body["user"]["organization"] == "NASA"
    assert "password_hash" not in body["user"]

    claims = jwt.decode(body["token"], config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    assert claims["email"] == config.ADMIN_EMAIL
    assert claims["sub"] == str(body["user"]["id"])
    assert claims["exp"] - claims["iat"] == 24 * 3600

    user = db.query(models.User).filter_by(email=config.ADMIN_EMAIL).one()
    assert user.last_login is not None


def test_login_unknown_email(client):
    r = login(client, "nobody@example.com", "whatever")
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid credentials"}


def test_login_wrong_password(client):
    r = login(client, config.ADMIN_EMAIL, "not-the-password")
    assert r.status_code == 401
    assert "token" not in r.json()


def test_demo_login_accepts_any_password(client, monkeypatch):
    monkeypatch.setattr(config, "DEMO_LOGIN", True)
    r = login(client, config.ADMIN_EMAIL, "anything")
    assert r.status_code == 200
    assert r.json()["token"]

    # unknown emails are still rejected
    assert login(client, "nobody@example.com", "anything").status_code == 401


def test_login_missing_fields(client):
    assert login(client, email=config.ADMIN_EMAIL).status_code == 400
    assert login(client, password="secret").status_code == 400
    r = login(client, email="", password="")
    assert r.status_code == 400
    assert r.json() == {"error": "Email and password are required"}


def test_login_malformed_body(client):
    r = client.post("/api/auth/login", content="not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_login_validation_happens_before_store_access(client, app):
    fake = MagicMock()

    def fake_db():
        yield fake

    app.dependency_overrides[get_db] = fake_db
    try:
        r = login(client, email=config.ADMIN_EMAIL)
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 400
    fake.query.assert_not_called()
    fake.get.assert_not_called()


def test_current_user(client):
    token = login(client, config.ADMIN_EMAIL, config.ADMIN_PASSWORD).json()["token"]
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["email"] == config.ADMIN_EMAIL


def test_current_user_requires_token(client):
    r = client.get("/api/auth/me")
    assert r.status_code == 401
    assert r.json() == {"error": "Missing bearer token"}


def test_current_user_rejects_expired_token(client, db):
    user = db.query(models.User).filter_by(email=config.ADMIN_EMAIL).one()
    token = create_access_token(user, now=datetime.now(timezone.utc) - timedelta(hours=25))
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json() == {"error": "Token expired"}


def test_current_user_rejects_foreign_signature(client, db):
    user = db.query(models.User).filter_by(email=config.ADMIN_EMAIL).one()
    token = create_access_token(user, secret="someone-else")
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid token"}
