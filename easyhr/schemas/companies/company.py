from datetime import datetime
from pydantic import Field, field_validator
from easyhr.models.companies.company import EmployeesCount
from easyhr.schemas.base import CamelModel


class CompanyDescriptor(CamelModel):
  """Company block sent with a registration."""
  company_id: str = Field(min_length=1, max_length=64)
  employees_count: EmployeesCount
  name: str | None = Field(default=None, max_length=100)

  @field_validator("company_id", "name", mode="before")
  @classmethod
  def strip(cls, v):
    return v.strip() if isinstance(v, str) else v


class CompanyUpdate(CamelModel):
  name: str | None = Field(default=None, min_length=1, max_length=100)
  employees_count: EmployeesCount | None = None


class CompanyOut(CamelModel):
  id: int
  name: str
  company_id: str
  employees_count: str
  created_at: datetime | None = None
