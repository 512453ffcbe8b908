class ErrorMessages:
  VALIDATION = "Invalid request"
  EMAIL_ALREADY_REGISTERED = "Email already registered"
  COMPANY_ALREADY_EXISTS = "A company with that name or company ID already exists"
  INVALID_OR_EXPIRED_TOKEN = "Invalid or expired token"
  ALREADY_VERIFIED = "Email already verified"
  USER_NOT_FOUND = "User not found"
  COMPANY_NOT_FOUND = "Company not found"
  DEPARTMENT_NOT_FOUND = "Department not found"
  INVALID_CREDENTIALS = "Invalid credentials"
  EMAIL_NOT_VERIFIED = "Please verify your email first"
  NOT_AUTHORIZED = "Not authorized to access this route"
  USER_NO_LONGER_EXISTS = "User no longer exists"
  FORBIDDEN = "You do not have permission to perform this action"
  EMAIL_NOT_SENT = "Email could not be sent"
  SERVER_ERROR = "Server Error"

  # Password policy
  PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
  PASSWORD_NEEDS_UPPERCASE = "Password must contain an uppercase letter"
  PASSWORD_NEEDS_NUMBER = "Password must contain a number"
  PASSWORD_NEEDS_SPECIAL = "Password must contain a special character"


class AppError(Exception):
  """Base for every error that maps onto the JSON error envelope."""

  status_code = 500
  default_message = ErrorMessages.SERVER_ERROR

  def __init__(self, message: str | None = None):
    self.message = message or self.default_message
    super().__init__(self.message)


class ValidationError(AppError):
  status_code = 400
  default_message = ErrorMessages.VALIDATION


class DuplicateEmail(AppError):
  status_code = 400
  default_message = ErrorMessages.EMAIL_ALREADY_REGISTERED


class DuplicateCompany(AppError):
  status_code = 400
  default_message = ErrorMessages.COMPANY_ALREADY_EXISTS


class InvalidOrExpiredToken(AppError):
  status_code = 400
  default_message = ErrorMessages.INVALID_OR_EXPIRED_TOKEN


class AlreadyVerified(AppError):
  status_code = 400
  default_message = ErrorMessages.ALREADY_VERIFIED


class InvalidCredentials(AppError):
  status_code = 401
  default_message = ErrorMessages.INVALID_CREDENTIALS


class EmailNotVerified(AppError):
  status_code = 401
  default_message = ErrorMessages.EMAIL_NOT_VERIFIED


class Unauthenticated(AppError):
  status_code = 401
  default_message = ErrorMessages.NOT_AUTHORIZED


class Forbidden(AppError):
  status_code = 403
  default_message = ErrorMessages.FORBIDDEN


class UserNotFound(AppError):
  status_code = 404
  default_message = ErrorMessages.USER_NOT_FOUND


class CompanyNotFound(AppError):
  status_code = 404
  default_message = ErrorMessages.COMPANY_NOT_FOUND


class DepartmentNotFound(AppError):
  status_code = 404
  default_message = ErrorMessages.DEPARTMENT_NOT_FOUND


class EmailDeliveryFailed(AppError):
  status_code = 500
  default_message = ErrorMessages.EMAIL_NOT_SENT
