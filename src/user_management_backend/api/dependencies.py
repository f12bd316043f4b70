"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

_security = HTTPBearer(
    auto_error=False,
    bearerFormat="Token",
    scheme_name="Bearer",
    description="Enter 'Bearer' followed by a space and your token",
)


def document_bearer_auth(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
) -> HTTPAuthorizationCredentials | None:
    """Advertise the bearer scheme in the OpenAPI document.

    Enforcement happens in :class:`AuthenticationMiddleware`; this dependency
    never rejects a request.
    """

    return credentials


__all__ = ["document_bearer_auth"]
