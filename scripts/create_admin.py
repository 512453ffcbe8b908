import os
import sys

from easyhr.core.config import settings
from easyhr.db.session import Database
from easyhr.models.companies.company import EmployeesCount
from easyhr.models.users.user import Role
from easyhr.schemas.companies.company import CompanyDescriptor
from easyhr.services.companies import get_or_create_company
from easyhr.services.users import create_user, get_user_by_email


def main():
  email = settings.admin_email or os.getenv("ADMIN_EMAIL", "admin@easyhr.dev")
  password = settings.admin_password
  if not password:
    print("ADMIN_PASSWORD is required", file=sys.stderr)
    return 1

  db_handle = Database(settings.sqlalchemy_url)
  db_handle.create_all()
  db = db_handle.session()
  try:
    if get_user_by_email(db, email):
      print("Admin already exists; nothing changed")
      return 0

    company, _ = get_or_create_company(
      db,
      CompanyDescriptor(company_id=settings.admin_company_id, employees_count=EmployeesCount.XS),
      default_name="EasyHR Administration",
    )
    user = create_user(
      db,
      first_name=os.getenv("ADMIN_FIRST_NAME", "Admin"),
      last_name=os.getenv("ADMIN_LAST_NAME", "User"),
      email=email,
      company_id=company.id,
      password=password,
      role=Role.ADMIN.value,
      is_email_verified=True,
    )
    print(f"Admin created: {user.email}")
    return 0
  finally:
    db.close()


if __name__ == "__main__":
  sys.exit(main())
