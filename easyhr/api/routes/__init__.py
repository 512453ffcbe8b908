from .auth.auth import router as auth_router
from .users.users import router as users_router
from .companies.companies import router as companies_router
from .departments.departments import router as departments_router

__all__ = [
    "auth_router",
    "users_router",
    "companies_router",
    "departments_router",
]
