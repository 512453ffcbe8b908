from datetime import datetime
from sqlalchemy import String, ForeignKey, Integer, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from easyhr.db.session import Base


class Department(Base):
  __tablename__ = "departments"

  id: Mapped[int] = mapped_column(primary_key=True, index=True)
  name: Mapped[str] = mapped_column(String(100))
  email: Mapped[str | None] = mapped_column(String(255), nullable=True)
  lead: Mapped[str | None] = mapped_column(String(255), nullable=True)
  company_id: Mapped[int] = mapped_column(Integer, ForeignKey("companies.id"), index=True)
  created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), index=True)

  company = relationship("Company", back_populates="departments")
