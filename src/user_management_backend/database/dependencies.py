"""FastAPI dependencies for store access."""

from typing import Annotated

from fastapi import Depends, Request

from user_management_backend.database.repositories import UserRepository
from user_management_backend.database.service import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store owned by the running application."""
    return request.app.state.user_store


def get_user_repository(
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UserRepository:
    """Return a :class:`UserRepository` over the application's store."""
    return UserRepository(store)
