"""Single-use email verification tokens.

Only the keyed hash and the expiry are ever persisted. The plain token
travels in the emailed link and nowhere else.
"""
import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=1)


@dataclass(frozen=True)
class IssuedToken:
  plain: str
  hash: str
  expires_at: datetime


def utcnow() -> datetime:
  return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
  # SQLite hands back naive datetimes; everything we store is UTC
  if value.tzinfo is None:
    return value.replace(tzinfo=timezone.utc)
  return value.astimezone(timezone.utc)


class TokenService:
  def __init__(self, secret: str, ttl: timedelta = DEFAULT_TTL):
    if not secret:
      raise ValueError("TokenService requires a non-empty secret")
    self._secret = secret.encode("utf-8")
    self.ttl = ttl

  def hash(self, plain: str) -> str:
    return hmac.new(self._secret, plain.encode("utf-8"), hashlib.sha256).hexdigest()

  def issue(self, now: datetime | None = None) -> IssuedToken:
    plain = secrets.token_hex(20)
    issued_at = now or utcnow()
    return IssuedToken(plain=plain, hash=self.hash(plain), expires_at=issued_at + self.ttl)

  def verify(
    self,
    plain: str | None,
    stored_hash: str | None,
    stored_expiry: datetime | None,
    now: datetime | None = None,
  ) -> bool:
    """True only if the token matches the stored hash and has not expired."""
    if not plain or not stored_hash or stored_expiry is None:
      return False
    if not hmac.compare_digest(self.hash(plain), stored_hash):
      return False
    current = as_utc(now) if now else utcnow()
    if current >= as_utc(stored_expiry):
      logger.info("Verification token presented after expiry")
      return False
    return True
