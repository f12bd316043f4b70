"""Route definitions for public HTTP endpoints."""

from user_management_backend.api.routers.diagnostics import router as diagnostics_router
from user_management_backend.api.routers.users import router as users_router

__all__ = ["diagnostics_router", "users_router"]
