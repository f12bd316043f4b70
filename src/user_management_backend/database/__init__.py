"""In-memory storage for user records and its FastAPI wiring."""

from user_management_backend.database.dependencies import (
    get_user_repository,
    get_user_store,
)
from user_management_backend.database.repositories import UserRepository
from user_management_backend.database.schemas import UserSchema
from user_management_backend.database.service import SEED_USERS, UserStore

__all__ = [
    "SEED_USERS",
    "UserRepository",
    "UserSchema",
    "UserStore",
    "get_user_repository",
    "get_user_store",
]
