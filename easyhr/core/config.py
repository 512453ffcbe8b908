import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
  value = os.getenv(name)
  if value is None:
    return default
  return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
  app_name: str = os.getenv("APP_NAME", "EasyHR API")
  api_prefix: str = os.getenv("API_PREFIX", "/api")
  client_url: str = os.getenv("CLIENT_URL", "http://localhost:8080")
  log_level: str = os.getenv("LOG_LEVEL", "INFO")

  # Session tokens
  jwt_secret: str = os.getenv("JWT_SECRET", "change-me-in-production")
  jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
  jwt_expire_days: int = int(os.getenv("JWT_EXPIRE_DAYS", "30"))

  # Email verification
  email_token_secret: str | None = os.getenv("EMAIL_TOKEN_SECRET")
  email_token_ttl_minutes: int = int(os.getenv("EMAIL_TOKEN_TTL_MINUTES", "60"))

  # Outbound mail
  mail_username: str = os.getenv("MAIL_USERNAME", "")
  mail_password: str = os.getenv("MAIL_PASSWORD", "")
  mail_from: str = os.getenv("MAIL_FROM", "noreply@easyhr.dev")
  mail_from_name: str = os.getenv("MAIL_FROM_NAME", "EasyHR")
  mail_server: str = os.getenv("MAIL_SERVER", "localhost")
  mail_port: int = int(os.getenv("MAIL_PORT", "587"))
  mail_starttls: bool = _env_bool("MAIL_STARTTLS", True)
  mail_ssl_tls: bool = _env_bool("MAIL_SSL_TLS", False)
  mail_suppress_send: bool = _env_bool("MAIL_SUPPRESS_SEND", False)

  admin_email: str | None = os.getenv("ADMIN_EMAIL")
  admin_password: str | None = os.getenv("ADMIN_PASSWORD")
  admin_company_id: str = os.getenv("ADMIN_COMPANY_ID", "EASYHR-ADMIN")

  database_url: str | None = os.getenv("DATABASE_URL")

  def __init__(self, **overrides):
    for key, value in overrides.items():
      if not hasattr(type(self), key):
        raise AttributeError(f"Unknown setting: {key}")
      setattr(self, key, value)

  # Absolute path so the database lands in the same place regardless of cwd
  @property
  def sqlite_path(self) -> str:
    if os.getenv("SQLITE_PATH"):
      return os.getenv("SQLITE_PATH")

    project_dir = Path(__file__).parent.parent.parent
    db_path = project_dir / "data" / "app.db"
    return str(db_path)

  @property
  def sqlalchemy_url(self) -> str:
    return self.database_url or f"sqlite:///{self.sqlite_path}"

  @property
  def token_secret(self) -> str:
    return self.email_token_secret or self.jwt_secret


settings = Settings()
