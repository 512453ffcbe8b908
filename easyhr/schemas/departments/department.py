from datetime import datetime
from pydantic import EmailStr, Field, field_validator
from easyhr.schemas.base import CamelModel


class DepartmentCreate(CamelModel):
  name: str = Field(min_length=1, max_length=100)
  email: EmailStr | None = None
  lead: str | None = Field(default=None, max_length=255)

  @field_validator("name", "lead", mode="before")
  @classmethod
  def strip(cls, v):
    return v.strip() if isinstance(v, str) else v

  @field_validator("email", "lead", mode="before")
  @classmethod
  def blank_is_none(cls, v):
    if isinstance(v, str) and not v.strip():
      return None
    return v


class DepartmentUpdate(DepartmentCreate):
  name: str | None = Field(default=None, min_length=1, max_length=100)


class DepartmentOut(CamelModel):
  id: int
  name: str
  email: str | None = None
  lead: str | None = None
  company: int = Field(validation_alias="company_id")
  created_at: datetime | None = None
