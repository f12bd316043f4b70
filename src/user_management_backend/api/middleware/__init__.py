"""Request pipeline wrapped around every route.

Stages, outermost first:

1. :class:`ErrorBoundaryMiddleware` - converts uncaught faults to a 500.
2. :class:`AuthenticationMiddleware` - short-circuits with 401 on a missing
   or malformed bearer credential.
3. :class:`RequestLoggingMiddleware` - logs the request and its outcome.

Responses travel back through the stages in reverse order.
"""

from starlette.middleware import Middleware

from user_management_backend.api.middleware.authentication import (
    UNAUTHORIZED_MESSAGE,
    AuthenticationMiddleware,
    is_exempt_path,
    is_valid_token,
)
from user_management_backend.api.middleware.error_boundary import (
    INTERNAL_ERROR_MESSAGE,
    ErrorBoundaryMiddleware,
)
from user_management_backend.api.middleware.request_logging import (
    RequestLoggingMiddleware,
)

PIPELINE = (
    ErrorBoundaryMiddleware,
    AuthenticationMiddleware,
    RequestLoggingMiddleware,
)


def build_pipeline() -> list[Middleware]:
    """Return the middleware list for ``FastAPI(middleware=...)``.

    Starlette treats the first entry as the outermost layer.
    """
    return [Middleware(middleware_class) for middleware_class in PIPELINE]


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "PIPELINE",
    "UNAUTHORIZED_MESSAGE",
    "AuthenticationMiddleware",
    "ErrorBoundaryMiddleware",
    "RequestLoggingMiddleware",
    "build_pipeline",
    "is_exempt_path",
    "is_valid_token",
]
