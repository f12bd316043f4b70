"""In-memory user storage."""

from __future__ import annotations

from typing import TYPE_CHECKING

from user_management_backend.database.schemas import UserSchema

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


SEED_USERS: tuple[tuple[str, str, int], ...] = (
    ("John Doe", "john.doe@example.com", 30),
    ("Jane Smith", "jane.smith@example.com", 25),
)


class UserStore:
    """Ordered, mutable collection of :class:`UserSchema` rows.

    Rows keep insertion order and are looked up by linear scan. The store
    remembers the highest id it has ever held and issues the next one above
    it (``1`` for a fresh empty store). While no row has been removed this is
    ``max(existing ids) + 1``; removing the newest row does not recycle its id.

    The store does no locking. FastAPI runs the sync route handlers in a
    thread pool, so two concurrent creates can race on the next id; callers
    that need stronger guarantees must serialize writes themselves.
    """

    def __init__(self, users: Iterable[UserSchema] = ()) -> None:
        self._users: list[UserSchema] = list(users)
        self._high_water = max((user.id for user in self._users), default=0)

    @classmethod
    def seeded(cls) -> UserStore:
        """Return a store holding the sample rows served at startup."""
        return cls(
            UserSchema(id=index, name=name, email=email, age=age)
            for index, (name, email, age) in enumerate(SEED_USERS, start=1)
        )

    def __iter__(self) -> Iterator[UserSchema]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def next_id(self) -> int:
        """Return the id the next appended row will receive."""
        return self._high_water + 1

    def find(self, user_id: int) -> UserSchema | None:
        """Return the row with *user_id*, or ``None``."""
        return next((user for user in self._users if user.id == user_id), None)

    def append(self, user: UserSchema) -> UserSchema:
        """Append *user* after stamping it with :meth:`next_id`."""
        user.id = self.next_id()
        self._users.append(user)
        self._high_water = user.id
        return user

    def remove(self, user: UserSchema) -> None:
        """Remove *user* from the store."""
        self._users.remove(user)


__all__ = ["SEED_USERS", "UserStore"]
