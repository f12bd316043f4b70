"""Bearer credential gate in front of the API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from user_management_backend.shared import get_logger

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response

logger = get_logger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized. Valid token required."
BEARER_PREFIX = "Bearer "
EXEMPT_PATH_SEGMENTS = ("/openapi", "/swagger")


def is_exempt_path(path: str) -> bool:
    """Return ``True`` for the documentation surfaces and the root path.

    Prefixes match whole segments, case-insensitively: ``/swagger`` and
    ``/swagger/index.html`` are exempt, ``/swaggerish`` is not.
    """
    if path == "/":
        return True
    lowered = path.lower()
    return any(
        lowered == prefix or lowered.startswith(f"{prefix}/")
        for prefix in EXEMPT_PATH_SEGMENTS
    )


def is_valid_token(authorization: str) -> bool:
    """Syntactic check only: ``Bearer `` followed by at least one character."""
    return authorization.startswith(BEARER_PREFIX) and len(authorization) > len(
        BEARER_PREFIX
    )


def _unauthorized() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": UNAUTHORIZED_MESSAGE},
    )


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Reject requests to protected paths that lack a bearer credential."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if is_exempt_path(path):
            return await call_next(request)

        authorization = request.headers.get("Authorization")
        if authorization is None:
            logger.warning("authorization_header_missing", path=path)
            return _unauthorized()

        if not is_valid_token(authorization):
            logger.warning("invalid_token", path=path)
            return _unauthorized()

        return await call_next(request)
