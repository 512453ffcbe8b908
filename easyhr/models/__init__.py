from .companies.company import Company, EmployeesCount
from .users.user import User, Role
from .departments.department import Department

__all__ = ["Company", "EmployeesCount", "User", "Role", "Department"]
