from datetime import timedelta

import pytest
from sqlmodel import select

from app.core.config import jwt_settings
from app.core.errors import ConflictError
from app.db.repositories.users import UserRepository
from app.features.authentication.schemas import RegisterIn
from app.features.authentication.services import AuthService
from app.db.models.users import User
from app.security.password import hash_password
from app.security.tokens import JWTSettings, create_access_token

from conftest import bearer, register


def test_register_then_me(client):
    resp = client.post("/api/auth/register", json={"email": "a@b.com", "password": "x", "name": "A"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["token"]
    assert body["user"]["email"] == "a@b.com"

    me = client.get("/api/auth/me", headers=bearer(body["token"]))
    assert me.status_code == 200
    profile = me.json()
    assert profile["id"] == body["user"]["id"]
    assert profile["email"] == "a@b.com"
    assert profile["name"] == "A"
    assert profile["onboarded"] is False
    assert "createdAt" in profile
    assert "password" not in profile
    assert "googleId" not in profile


def test_register_hashes_password(client, session):
    register(client, "hash@example.com", password="plain-text")
    user = session.exec(select(User).where(User.email == "hash@example.com")).one()
    assert user.password != "plain-text"
    assert user.password.startswith("$2")


def test_register_requires_email_and_password(client):
    resp = client.post("/api/auth/register", json={"email": "a@b.com"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Email and password are required"}

    resp = client.post("/api/auth/register", json={"email": "   ", "password": "x"})
    assert resp.status_code == 400


def test_register_duplicate_email_does_not_create_user(client, session):
    register(client, "dup@example.com")
    resp = client.post("/api/auth/register", json={"email": "dup@example.com", "password": "other"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "User already exists"}

    users = session.exec(select(User).where(User.email == "dup@example.com")).all()
    assert len(users) == 1


def test_login_success(client):
    register(client, "log@example.com", password="right-pass")
    resp = client.post("/api/auth/login", json={"email": "log@example.com", "password": "right-pass"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["user"]["email"] == "log@example.com"
    assert client.get("/api/auth/me", headers=bearer(body["token"])).status_code == 200


def test_login_wrong_password(client):
    register(client, "log@example.com", password="right-pass")
    resp = client.post("/api/auth/login", json={"email": "log@example.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_unknown_email(client):
    resp = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "x"})
    assert resp.status_code == 401


def test_login_missing_fields(client):
    resp = client.post("/api/auth/login", json={"email": "nobody@example.com"})
    assert resp.status_code == 400


def test_login_rejects_google_only_account(client, session):
    session.add(User(email="g@example.com", google_id="google-1", name="G"))
    session.commit()

    resp = client.post("/api/auth/login", json={"email": "g@example.com", "password": "anything"})
    assert resp.status_code == 401


def test_me_requires_token(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Access token required"}


def test_me_rejects_garbage_token(client):
    resp = client.get("/api/auth/me", headers=bearer("not-a-jwt"))
    assert resp.status_code == 403
    assert resp.json() == {"error": "Invalid or expired token"}


def test_me_rejects_expired_token(client, session):
    session.add(User(email="old@example.com", password=hash_password("x")))
    session.commit()
    user = session.exec(select(User).where(User.email == "old@example.com")).one()

    expired_settings = JWTSettings(
        secret=jwt_settings.secret,
        issuer=jwt_settings.issuer,
        algorithm=jwt_settings.algorithm,
        access_ttl=timedelta(seconds=-60),
    )
    token = create_access_token(user_id=user.id, settings=expired_settings)
    assert client.get("/api/auth/me", headers=bearer(token)).status_code == 403


def test_me_for_missing_user(client):
    token = create_access_token(user_id=9999, settings=jwt_settings)
    resp = client.get("/api/auth/me", headers=bearer(token))
    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


def test_register_race_on_same_email_is_a_conflict(session):
    repo = UserRepository(session)
    svc = AuthService(user_repo=repo, jwt_settings=jwt_settings)
    svc.register(RegisterIn(email="race@example.com", password="pw"))

    # le second appel a lu la base avant que le premier ne commite
    repo.get_by_email = lambda email: None
    with pytest.raises(ConflictError):
        svc.register(RegisterIn(email="race@example.com", password="pw"))

    assert len(session.exec(select(User).where(User.email == "race@example.com")).all()) == 1
