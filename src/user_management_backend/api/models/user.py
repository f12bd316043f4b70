"""Pydantic models for the user endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserRequest(BaseModel):
    """Payload for creating or updating a user.

    A client-supplied ``id`` is accepted and discarded; the store owns IDs.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    age: int = 0


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int


class ErrorResponse(BaseModel):
    """Body returned by the pipeline when it short-circuits a request."""

    error: str
