from dataclasses import dataclass
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from easyhr.core.config import Settings
from easyhr.core.errors import EmailNotVerified, ErrorMessages, Forbidden, Unauthenticated
from easyhr.db.session import get_db
from easyhr.models.users.user import Role, User
from easyhr.services.auth import AuthService
from easyhr.services.mailer import get_mailer
from easyhr.services.security import decode_session_token
from easyhr.services.users import get_user

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
  """The authenticated caller, threaded explicitly into handlers."""
  user: User
  user_id: int
  company_id: int
  role: str

  @property
  def is_admin(self) -> bool:
    return self.role == Role.ADMIN.value


def get_settings(request: Request) -> Settings:
  return request.app.state.settings


def get_auth_service(
  db: Session = Depends(get_db),
  settings: Settings = Depends(get_settings),
  mailer=Depends(get_mailer),
) -> AuthService:
  return AuthService(db, settings, mailer)


def link_base(request: Request, settings: Settings = Depends(get_settings)) -> str:
  return settings.client_url or str(request.base_url)


def get_auth_context(
  credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
  db: Session = Depends(get_db),
  settings: Settings = Depends(get_settings),
) -> AuthContext:
  if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
    raise Unauthenticated()

  claims = decode_session_token(credentials.credentials, settings)
  user = get_user(db, claims.user_id)
  if user is None:
    raise Unauthenticated(ErrorMessages.USER_NO_LONGER_EXISTS)
  if not user.is_email_verified:
    raise EmailNotVerified()

  # The role comes from the stored user, so a demotion takes effect at once
  return AuthContext(user=user, user_id=user.id, company_id=user.company_id, role=user.role)


def require_roles(*roles: str):
  allowed = {r.value if isinstance(r, Role) else r for r in roles}

  def checker(ctx: AuthContext = Depends(get_auth_context)) -> AuthContext:
    if ctx.role not in allowed:
      raise Forbidden(f"Role {ctx.role} is not authorized to access this route")
    return ctx

  return checker
