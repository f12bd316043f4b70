"""Repositories over the in-memory store."""

from user_management_backend.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
