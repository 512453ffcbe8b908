import re
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import InvalidTokenError
from passlib.context import CryptContext

from easyhr.core.config import Settings
from easyhr.core.errors import ErrorMessages, Unauthenticated

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

SPECIAL_CHARS = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")


def hash_password(raw: str) -> str:
  return pwd_context.hash(raw)


def verify_password(raw: str, hashed: str | None) -> bool:
  if not raw or not hashed:
    return False
  try:
    return pwd_context.verify(raw, hashed)
  except (ValueError, TypeError):
    return False


def generate_placeholder_password() -> str:
  return secrets.token_hex(10)


def password_problems(raw: str) -> list[str]:
  problems = []
  if len(raw) < 8:
    problems.append(ErrorMessages.PASSWORD_TOO_SHORT)
  if not re.search(r"[A-Z]", raw):
    problems.append(ErrorMessages.PASSWORD_NEEDS_UPPERCASE)
  if not re.search(r"[0-9]", raw):
    problems.append(ErrorMessages.PASSWORD_NEEDS_NUMBER)
  if not SPECIAL_CHARS.search(raw):
    problems.append(ErrorMessages.PASSWORD_NEEDS_SPECIAL)
  return problems


def validate_password_strength(raw: str) -> str:
  problems = password_problems(raw)
  if problems:
    raise ValueError(problems[0])
  return raw


@dataclass(frozen=True)
class SessionClaims:
  user_id: int
  role: str
  expires_at: datetime


def create_session_token(user, settings: Settings, now: datetime | None = None) -> str:
  issued_at = now or datetime.now(timezone.utc)
  payload = {
    "sub": str(user.id),
    "role": user.role,
    "iat": issued_at,
    "exp": issued_at + timedelta(days=settings.jwt_expire_days),
  }
  return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str, settings: Settings) -> SessionClaims:
  try:
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    return SessionClaims(
      user_id=int(payload["sub"]),
      role=str(payload.get("role", "")),
      expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
  except (InvalidTokenError, KeyError, TypeError, ValueError):
    raise Unauthenticated(ErrorMessages.NOT_AUTHORIZED)
