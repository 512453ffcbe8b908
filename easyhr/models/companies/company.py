import enum
from datetime import datetime
from sqlalchemy import String, DateTime, func, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from easyhr.db.session import Base


class EmployeesCount(str, enum.Enum):
  XS = "1-10"
  S = "11-50"
  M = "51-200"
  L = "201-500"
  XL = "501-1000"
  XXL = "1001-5000"
  ENTERPRISE = "5000+"


class Company(Base):
  __tablename__ = "companies"
  __table_args__ = (
    UniqueConstraint("company_id", name="uq_companies_company_id"),
    UniqueConstraint("name", name="uq_companies_name"),
  )

  id: Mapped[int] = mapped_column(primary_key=True, index=True)
  name: Mapped[str] = mapped_column(String(100), index=True)
  # External tenant key, e.g. a registration number
  company_id: Mapped[str] = mapped_column(String(64), index=True)
  employees_count: Mapped[str] = mapped_column(String(16))
  created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), index=True)

  users = relationship("User", back_populates="company")
  departments = relationship("Department", back_populates="company", cascade="all, delete-orphan")

  def __repr__(self):
    return f"<Company {self.company_id} {self.name}>"
