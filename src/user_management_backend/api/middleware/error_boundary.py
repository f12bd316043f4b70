"""Outermost stage: turn any uncaught exception into a generic 500."""

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

INTERNAL_ERROR_MESSAGE = "Internal server error."


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Catch faults raised anywhere downstream.

    The fault is logged with its traceback and replaced by a fresh JSON
    response, so nothing the failing handler produced reaches the client and
    no internal detail leaks into the body. Successful responses pass through
    untouched.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "unhandled_exception",
                method=request.method,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": INTERNAL_ERROR_MESSAGE},
            )
