"""API layer: application factory, middleware pipeline and routers."""

from user_management_backend.api.app import create_api

__all__ = ["create_api"]
