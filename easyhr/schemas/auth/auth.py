from pydantic import EmailStr, Field, field_validator, model_validator
from easyhr.schemas.base import CamelModel
from easyhr.schemas.companies.company import CompanyDescriptor
from easyhr.schemas.users.user import UserSummary
from easyhr.services.security import validate_password_strength


class RegisterRequest(CamelModel):
  first_name: str = Field(min_length=1, max_length=120)
  last_name: str = Field(default="", max_length=120)
  email: EmailStr
  phone_number: str | None = Field(default=None, max_length=64)
  job_title: str | None = Field(default=None, max_length=120)
  company: CompanyDescriptor


class VerifyEmailResponse(CamelModel):
  success: bool = True
  message: str
  user_id: int
  email: str


class CreatePasswordRequest(CamelModel):
  user_id: int | None = None
  email: EmailStr | None = None
  password: str

  @field_validator("password")
  @classmethod
  def strong_password(cls, v: str) -> str:
    return validate_password_strength(v)

  @model_validator(mode="after")
  def user_reference(self):
    if self.user_id is None and self.email is None:
      raise ValueError("Provide a userId or an email")
    return self


class LoginRequest(CamelModel):
  email: EmailStr
  password: str = Field(min_length=1)


class ResendVerificationRequest(CamelModel):
  email: EmailStr


class UpdateEmailRequest(CamelModel):
  current_email: EmailStr
  new_email: EmailStr


class TokenResponse(CamelModel):
  success: bool = True
  message: str | None = None
  token: str
  user: UserSummary
