from datetime import datetime, timedelta, timezone

import jwt
from sqlalchemy import select

from easyhr.models.users.user import User
from easyhr.services.security import create_session_token
from conftest import auth, onboard, register


def test_profile_requires_token(client):
  resp = client.get("/api/users/me")
  assert resp.status_code == 401
  assert resp.json() == {"success": False, "error": "Not authorized to access this route"}


def test_rejects_garbage_and_foreign_tokens(client, mailer, settings):
  onboard(client, mailer)
  assert client.get("/api/users/me", headers=auth("not-a-jwt")).status_code == 401
  assert client.get("/api/users/me", headers={"Authorization": "Token abc"}).status_code == 401

  forged = jwt.encode({"sub": "1", "role": "admin"}, "other-secret", algorithm="HS256")
  assert client.get("/api/users/me", headers=auth(forged)).status_code == 401


def test_rejects_expired_token(client, mailer, settings, db):
  onboard(client, mailer)
  user = db.scalar(select(User))
  stale = create_session_token(user, settings, now=datetime.now(timezone.utc) - timedelta(days=31))
  assert client.get("/api/users/me", headers=auth(stale)).status_code == 401


def test_rejects_deleted_user(client, mailer, db):
  token = onboard(client, mailer)
  db.delete(db.scalar(select(User)))
  db.commit()

  resp = client.get("/api/users/me", headers=auth(token))
  assert resp.status_code == 401
  assert resp.json()["error"] == "User no longer exists"


def test_rejects_user_who_became_unverified(client, mailer):
  token = onboard(client, mailer)
  client.put("/api/auth/update-email", json={"currentEmail": "a@x.com", "newEmail": "b@x.com"})

  resp = client.get("/api/users/me", headers=auth(token))
  assert resp.status_code == 401
  assert resp.json()["error"] == "Please verify your email first"


def test_session_token_for_unverified_user_is_rejected(client, mailer, settings, db):
  register(client, mailer)
  token = create_session_token(db.scalar(select(User)), settings)
  assert client.get("/api/users/me", headers=auth(token)).status_code == 401


def test_get_and_update_profile(client, mailer):
  token = onboard(client, mailer)

  resp = client.get("/api/users/me", headers=auth(token))
  assert resp.status_code == 200
  profile = resp.json()["data"]
  assert profile["email"] == "a@x.com"
  assert profile["isEmailVerified"] is True
  assert profile["jobTitle"] == "HR Manager"
  assert "hashedPassword" not in profile

  resp = client.put(
    "/api/users/me",
    headers=auth(token),
    json={"firstName": "Anna", "phoneNumber": "555-0199", "role": "admin", "email": "x@x.com"},
  )
  assert resp.status_code == 200, resp.text
  profile = resp.json()["data"]
  assert profile["firstName"] == "Anna"
  assert profile["phoneNumber"] == "555-0199"
  assert profile["role"] == "user"
  assert profile["email"] == "a@x.com"


def test_change_password(client, mailer):
  token = onboard(client, mailer)

  resp = client.put(
    "/api/users/password", headers=auth(token),
    json={"currentPassword": "Wrong1!x", "newPassword": "Cc3#cccc"},
  )
  assert resp.status_code == 401

  resp = client.put(
    "/api/users/password", headers=auth(token),
    json={"currentPassword": "Aa1!aaaa", "newPassword": "Cc3#cccc"},
  )
  assert resp.status_code == 200
  assert resp.json()["success"] is True
  assert client.post("/api/auth/login", json={"email": "a@x.com", "password": "Cc3#cccc"}).status_code == 200
