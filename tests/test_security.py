from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from easyhr.core.config import Settings
from easyhr.core.errors import Unauthenticated
from easyhr.services.security import (
  create_session_token,
  decode_session_token,
  hash_password,
  password_problems,
  validate_password_strength,
  verify_password,
)


def test_password_hash_is_salted_and_verifiable():
  first = hash_password("Aa1!aaaa")
  second = hash_password("Aa1!aaaa")
  assert first != second
  assert "Aa1!aaaa" not in first
  assert verify_password("Aa1!aaaa", first)
  assert not verify_password("Aa1!aaab", first)


def test_verify_password_tolerates_bad_hashes():
  assert not verify_password("anything", None)
  assert not verify_password("anything", "")
  assert not verify_password("anything", "not-a-bcrypt-hash")
  assert not verify_password("", hash_password("x"))


@pytest.mark.parametrize("raw,problem", [
  ("Aa1!", "Password must be at least 8 characters"),
  ("aa1!aaaa", "Password must contain an uppercase letter"),
  ("Aaa!aaaa", "Password must contain a number"),
  ("Aa1aaaaa", "Password must contain a special character"),
])
def test_password_policy(raw, problem):
  assert problem in password_problems(raw)
  with pytest.raises(ValueError):
    validate_password_strength(raw)


def test_strong_password_passes():
  assert password_problems("Aa1!aaaa") == []
  assert validate_password_strength("Aa1!aaaa") == "Aa1!aaaa"


def test_session_token_round_trip():
  settings = Settings(jwt_secret="s3cret", jwt_expire_days=30)
  now = datetime.now(timezone.utc)
  token = create_session_token(SimpleNamespace(id=7, role="admin"), settings, now=now)

  claims = decode_session_token(token, settings)
  assert claims.user_id == 7
  assert claims.role == "admin"
  assert claims.expires_at - now > timedelta(days=29)


def test_session_token_rejected_with_other_secret_or_expired():
  settings = Settings(jwt_secret="s3cret")
  token = create_session_token(SimpleNamespace(id=7, role="user"), settings)
  with pytest.raises(Unauthenticated):
    decode_session_token(token, Settings(jwt_secret="different"))

  stale = create_session_token(
    SimpleNamespace(id=7, role="user"), settings,
    now=datetime.now(timezone.utc) - timedelta(days=settings.jwt_expire_days + 1),
  )
  with pytest.raises(Unauthenticated):
    decode_session_token(stale, settings)
