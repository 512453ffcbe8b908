import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import Settings, settings as default_settings
from .core.errors import AppError, ErrorMessages
from .db.session import Database
from .api.routes import auth_router, users_router, companies_router, departments_router
from .services.mailer import Mailer

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
  return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _validation_message(exc: RequestValidationError) -> str:
  errors = exc.errors()
  if not errors:
    return ErrorMessages.VALIDATION
  first = errors[0]
  message = str(first.get("msg", ErrorMessages.VALIDATION))
  # Messages raised by our own validators are already user-facing
  if first.get("type") == "value_error":
    return message.removeprefix("Value error, ")
  location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
  return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
  @app.exception_handler(AppError)
  async def app_error_handler(request: Request, exc: AppError):
    return _error(exc.status_code, exc.message)

  @app.exception_handler(RequestValidationError)
  async def validation_error_handler(request: Request, exc: RequestValidationError):
    return _error(400, _validation_message(exc))

  @app.exception_handler(StarletteHTTPException)
  async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))

  @app.exception_handler(Exception)
  async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, ErrorMessages.SERVER_ERROR)


def create_app(settings: Settings | None = None, mailer=None, database: Database | None = None) -> FastAPI:
  settings = settings or default_settings
  logging.basicConfig(level=settings.log_level)

  database = database or Database(settings.sqlalchemy_url)
  database.create_all()

  app = FastAPI(
    title=settings.app_name,
    openapi_tags=[
      {"name": "Auth", "description": "Registration, email verification and sessions"},
      {"name": "Users", "description": "Current user profile"},
      {"name": "Companies", "description": "Tenant companies"},
      {"name": "Departments", "description": "Departments of the caller's company"},
    ]
  )
  app.state.settings = settings
  app.state.db = database
  app.state.mailer = mailer or Mailer(settings)

  app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.client_url],
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    allow_headers=["*"],
  )

  register_exception_handlers(app)

  app.include_router(auth_router, prefix=settings.api_prefix, tags=["Auth"])
  app.include_router(users_router, prefix=settings.api_prefix, tags=["Users"])
  app.include_router(companies_router, prefix=settings.api_prefix, tags=["Companies"])
  app.include_router(departments_router, prefix=settings.api_prefix, tags=["Departments"])

  @app.get("/health", tags=["Auth"], include_in_schema=False)
  def health():
    return {"success": True, "status": "ok"}

  return app
