"""Entities stored by the in-memory database."""

from user_management_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
