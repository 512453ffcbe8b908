import enum
from datetime import datetime
from sqlalchemy import String, Boolean, ForeignKey, Integer, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from easyhr.db.session import Base


class Role(str, enum.Enum):
  USER = "user"
  ADMIN = "admin"


class User(Base):
  __tablename__ = "users"

  id: Mapped[int] = mapped_column(primary_key=True, index=True)
  first_name: Mapped[str] = mapped_column(String(120))
  last_name: Mapped[str] = mapped_column(String(120), default="")
  email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
  phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
  job_title: Mapped[str | None] = mapped_column(String(120), nullable=True)
  # Deferred: only loaded when a password check or update needs it
  hashed_password: Mapped[str] = mapped_column(String(255), deferred=True)
  role: Mapped[str] = mapped_column(String(32), default=Role.USER.value)

  is_email_verified: Mapped[bool] = mapped_column(Boolean, default=False)
  email_verification_token_hash: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
  email_verification_token_expiry: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

  company_id: Mapped[int] = mapped_column(Integer, ForeignKey("companies.id"), index=True)
  created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

  company = relationship("Company", back_populates="users")

  @property
  def full_name(self) -> str:
    return f"{self.first_name} {self.last_name}".strip()

  def __repr__(self):
    return f"<User {self.id} {self.email}>"
