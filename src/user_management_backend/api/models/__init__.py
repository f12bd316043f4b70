"""Models used for API request and response payloads."""

from user_management_backend.api.models.user import (
    ErrorResponse,
    UserRequest,
    UserResponse,
)

__all__ = [
    "ErrorResponse",
    "UserRequest",
    "UserResponse",
]
