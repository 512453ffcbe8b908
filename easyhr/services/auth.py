"""Registration, email verification and login.

Per-user lifecycle:

  register          -> registered, unverified (placeholder password)
  verify_email      -> verified, no usable password
  create_password   -> verified, active
  login             -> session token
  resend / update_email re-issue the verification token; update_email
  also drops the user back to unverified.
"""
import logging
from datetime import timedelta
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from easyhr.core.config import Settings
from easyhr.core.errors import (
  AlreadyVerified,
  DuplicateEmail,
  EmailNotVerified,
  InvalidCredentials,
  InvalidOrExpiredToken,
  UserNotFound,
)
from easyhr.models.users.user import User
from easyhr.schemas.auth.auth import RegisterRequest
from easyhr.services import companies as company_store
from easyhr.services import users as user_store
from easyhr.services.security import create_session_token
from easyhr.services.tokens import TokenService

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "Email Verification"


def build_token_service(settings: Settings) -> TokenService:
  return TokenService(settings.token_secret, timedelta(minutes=settings.email_token_ttl_minutes))


def verification_link(link_base: str, token: str) -> str:
  return f"{link_base.rstrip('/')}/verify-email/{token}"


def verification_message(link: str, ttl: timedelta, new_address: bool = False) -> str:
  minutes = int(ttl.total_seconds() // 60)
  if new_address:
    intro = "You are receiving this email because you need to confirm your new email address."
    outro = "If you did not request this change, please ignore this email."
  else:
    intro = "You are receiving this email because you need to confirm your email address."
    outro = "If you did not create this account, please ignore this email."
  return (
    f"{intro} Please click the link below to verify:\n\n"
    f"{link}\n\n"
    f"This link expires in {minutes} minutes.\n\n"
    f"{outro}\n"
  )


class AuthService:
  def __init__(self, db: Session, settings: Settings, mailer, tokens: TokenService | None = None):
    self.db = db
    self.settings = settings
    self.mailer = mailer
    self.tokens = tokens or build_token_service(settings)

  def _require_user(self, email: str) -> User:
    user = user_store.get_user_by_email(self.db, email)
    if not user:
      raise UserNotFound()
    return user

  def _store_new_token(self, user: User) -> str:
    issued = self.tokens.issue()
    user.email_verification_token_hash = issued.hash
    user.email_verification_token_expiry = issued.expires_at
    user_store.save_user(self.db, user)
    return issued.plain

  async def _send_verification(self, user: User, plain: str, link_base: str, new_address: bool = False) -> None:
    link = verification_link(link_base, plain)
    body = verification_message(link, self.tokens.ttl, new_address=new_address)
    # User and token are committed first; a failed send is recovered by resend
    await self.mailer.send(user.email, VERIFICATION_SUBJECT, body)
    logger.info("Verification email sent to user %s", user.id)

  def _register_records(self, payload: RegisterRequest) -> tuple[User, str]:
    email = str(payload.email)
    if user_store.email_taken(self.db, email):
      logger.warning("Registration rejected: email already registered")
      raise DuplicateEmail()

    company, created = company_store.get_or_create_company(
      self.db, payload.company, default_name=f"{payload.first_name}'s Company"
    )
    user = user_store.create_user(
      self.db,
      first_name=payload.first_name,
      last_name=payload.last_name,
      email=email,
      phone_number=payload.phone_number,
      job_title=payload.job_title,
      company_id=company.id,
    )
    logger.info("Registered user %s (company %s, new=%s)", user.id, company.company_id, created)
    return user, self._store_new_token(user)

  async def register(self, payload: RegisterRequest, link_base: str) -> User:
    # Queries, commits and bcrypt stay off the event loop
    user, plain = await run_in_threadpool(self._register_records, payload)
    await self._send_verification(user, plain, link_base)
    return user


  def verify_email(self, token: str) -> User:
    user = user_store.get_user_by_token_hash(self.db, self.tokens.hash(token))
    if not user or not self.tokens.verify(
      token, user.email_verification_token_hash, user.email_verification_token_expiry
    ):
      logger.warning("Rejected email verification token")
      raise InvalidOrExpiredToken()

    user.is_email_verified = True
    user.email_verification_token_hash = None
    user.email_verification_token_expiry = None
    user_store.save_user(self.db, user)
    logger.info("Email verified for user %s", user.id)
    return user

  def create_password(self, password: str, user_id: int | None = None, email: str | None = None) -> User:
    user = None
    if user_id is not None:
      user = user_store.get_user(self.db, user_id)
    elif email is not None:
      user = user_store.get_user_by_email(self.db, email)
    if not user:
      raise UserNotFound()
    if not user.is_email_verified:
      raise EmailNotVerified()

    user_store.set_password(self.db, user, password)
    logger.info("Password set for user %s", user.id)
    return user

  def login(self, email: str, password: str) -> tuple[str, User]:
    user = user_store.get_user_by_email(self.db, email)
    if not user or not user_store.match_password(user, password):
      logger.warning("Failed login attempt")
      raise InvalidCredentials()
    if not user.is_email_verified:
      raise EmailNotVerified()

    logger.info("User %s logged in", user.id)
    return self.session_token(user), user

  def session_token(self, user: User) -> str:
    return create_session_token(user, self.settings)

  def _reissue_records(self, email: str) -> tuple[User, str]:
    user = self._require_user(email)
    if user.is_email_verified:
      raise AlreadyVerified()
    return user, self._store_new_token(user)

  async def resend_verification(self, email: str, link_base: str) -> User:
    user, plain = await run_in_threadpool(self._reissue_records, email)
    await self._send_verification(user, plain, link_base)
    return user

  def _change_email_records(self, current_email: str, new_email: str) -> tuple[User, str]:
    user = self._require_user(current_email)
    if user_store.email_taken(self.db, new_email):
      raise DuplicateEmail()

    user.email = new_email
    user.is_email_verified = False
    logger.info("User %s changed email; verification required again", user.id)
    return user, self._store_new_token(user)

  async def update_email(self, current_email: str, new_email: str, link_base: str) -> User:
    user, plain = await run_in_threadpool(self._change_email_records, current_email, new_email)
    await self._send_verification(user, plain, link_base, new_address=True)
    return user


  def change_password(self, user: User, current_password: str, new_password: str) -> User:
    if not user_store.match_password(user, current_password):
      raise InvalidCredentials("Current password is incorrect")
    user_store.set_password(self.db, user, new_password)
    logger.info("Password changed for user %s", user.id)
    return user
