"""Repository helpers for working with users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from user_management_backend.database.schemas import UserSchema

if TYPE_CHECKING:
    from user_management_backend.database.service import UserStore


class UserRepository:
    """Encapsulates CRUD operations for :class:`UserSchema`."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def list_all(self) -> list[UserSchema]:
        """Return every user in insertion order."""
        return list(self._store)

    def get_by_id(self, user_id: int) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._store.find(user_id)

    def add(self, *, name: str, email: str, age: int) -> UserSchema:
        """Create a user with a store-assigned ID."""
        user = UserSchema(id=0, name=name, email=email, age=age)
        return self._store.append(user)

    def update(
        self, user_id: int, *, name: str, email: str, age: int
    ) -> UserSchema | None:
        """Overwrite name, email and age in place; the ID never changes."""
        user = self._store.find(user_id)
        if user is None:
            return None
        user.name = name
        user.email = email
        user.age = age
        return user

    def delete(self, user_id: int) -> bool:
        """Remove the user, returning ``False`` when it does not exist."""
        user = self._store.find(user_id)
        if user is None:
            return False
        self._store.remove(user)
        return True
