"""Request/response logging with elapsed time."""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from user_management_backend.shared import get_logger

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request on entry and its status and duration on exit.

    An exception raised downstream propagates unchanged; only the entry
    record is written in that case.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        method = request.method
        path = request.url.path
        logger.info(
            "request_started",
            method=method,
            path=path,
            started_at=datetime.now(UTC).isoformat(),
        )
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
        )
        return response
