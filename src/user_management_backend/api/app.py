"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from user_management_backend.api.middleware import build_pipeline
from user_management_backend.api.routers import diagnostics_router, users_router
from user_management_backend.database import UserStore
from user_management_backend.settings import BackendSettings, get_settings
from user_management_backend.shared import configure_logging, get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = get_logger(__name__)


def create_api(
    *,
    settings: BackendSettings | None = None,
    store: UserStore | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    The application owns its :class:`UserStore`; a seeded store is created
    when none is given.
    """
    config = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(config.log_level, config.log_format)
        logger.info(
            "api_started",
            users=len(app.state.user_store),
            docs_enabled=config.docs_enabled,
            diagnostics_enabled=config.diagnostics_enabled,
        )
        yield
        logger.info("api_stopped")

    docs_enabled = config.docs_enabled
    app = FastAPI(
        title=config.api_title,
        version=config.api_version,
        lifespan=lifespan,
        middleware=build_pipeline(),
        openapi_url=f"/openapi/{config.api_version}.json" if docs_enabled else None,
        docs_url="/" if docs_enabled else None,
        swagger_ui_oauth2_redirect_url="/swagger/oauth2-redirect",
        redoc_url=None,
    )
    app.state.user_store = store if store is not None else UserStore.seeded()
    app.include_router(users_router)
    if config.diagnostics_enabled:
        app.include_router(diagnostics_router)
    return app
