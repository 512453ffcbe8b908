import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from easyhr.core.errors import DuplicateEmail
from easyhr.models.users.user import User, Role
from easyhr.services.security import hash_password, verify_password, generate_placeholder_password

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "phone_number", "job_title")
REQUIRED_PROFILE_FIELDS = ("first_name", "last_name")


def get_user_by_email(db: Session, email: str) -> User | None:
  return db.scalar(select(User).where(User.email == email))


def get_user(db: Session, user_id: int) -> User | None:
  return db.get(User, user_id)


def get_user_by_token_hash(db: Session, token_hash: str) -> User | None:
  return db.scalar(select(User).where(User.email_verification_token_hash == token_hash))


def email_taken(db: Session, email: str) -> bool:
  return get_user_by_email(db, email) is not None


def create_user(
  db: Session,
  *,
  first_name: str,
  last_name: str,
  email: str,
  company_id: int,
  phone_number: str | None = None,
  job_title: str | None = None,
  password: str | None = None,
  role: str = Role.USER.value,
  is_email_verified: bool = False,
) -> User:
  """Insert a user. Without a password a random, never-disclosed one is set."""
  user = User(
    first_name=first_name,
    last_name=last_name,
    email=email,
    phone_number=phone_number,
    job_title=job_title,
    company_id=company_id,
    role=role,
    is_email_verified=is_email_verified,
    hashed_password=hash_password(password or generate_placeholder_password()),
  )
  db.add(user)
  try:
    db.commit()
  except IntegrityError:
    db.rollback()
    raise DuplicateEmail()
  db.refresh(user)
  logger.info("Created user %s for company %s", user.id, company_id)
  return user


def save_user(db: Session, user: User) -> User:
  db.add(user)
  try:
    db.commit()
  except IntegrityError:
    db.rollback()
    raise DuplicateEmail()
  db.refresh(user)
  return user


def set_password(db: Session, user: User, raw: str) -> User:
  user.hashed_password = hash_password(raw)
  return save_user(db, user)


def match_password(user: User, candidate: str) -> bool:
  return verify_password(candidate, user.hashed_password)


def update_user_details(db: Session, user: User, data: dict) -> User:
  for key, value in data.items():
    if key not in PROFILE_FIELDS:
      continue
    if value is None and key in REQUIRED_PROFILE_FIELDS:
      continue
    setattr(user, key, value)
  return save_user(db, user)
