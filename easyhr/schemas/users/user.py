from datetime import datetime
from pydantic import Field, field_validator
from easyhr.schemas.base import CamelModel
from easyhr.services.security import validate_password_strength


class UserSummary(CamelModel):
  id: int
  first_name: str
  last_name: str
  email: str
  role: str


class UserProfile(UserSummary):
  phone_number: str | None = None
  job_title: str | None = None
  is_email_verified: bool
  company: int = Field(validation_alias="company_id")
  created_at: datetime | None = None


class UserUpdate(CamelModel):
  first_name: str | None = Field(default=None, min_length=1, max_length=120)
  last_name: str | None = Field(default=None, max_length=120)
  phone_number: str | None = Field(default=None, max_length=64)
  job_title: str | None = Field(default=None, max_length=120)


class PasswordChange(CamelModel):
  current_password: str = Field(min_length=1)
  new_password: str

  @field_validator("new_password")
  @classmethod
  def strong_password(cls, v: str) -> str:
    return validate_password_strength(v)
