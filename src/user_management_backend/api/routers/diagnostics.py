"""Diagnostic endpoints for exercising the error boundary.

Only registered when ``diagnostics_enabled`` is set; hardened deployments
should turn it off.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from user_management_backend.api.dependencies import document_bearer_auth
from user_management_backend.api.models import ErrorResponse

router = APIRouter(
    prefix="/test",
    tags=["Testing"],
    dependencies=[Depends(document_bearer_auth)],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)


@router.get(
    "/error",
    operation_id="TestError",
    summary="Test error handling",
    description="Triggers an exception to test the error handling middleware",
)
def raise_test_error() -> None:
    msg = "Test exception for middleware validation"
    raise RuntimeError(msg)
