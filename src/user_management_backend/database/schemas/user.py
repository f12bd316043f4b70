"""User record held by the in-memory store."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class UserSchema:
    """Mutable user entity; ``id`` is owned by the store."""

    id: int
    name: str
    email: str
    age: int
