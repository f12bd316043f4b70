"""Shared utilities and cross-cutting helpers for the backend."""

from user_management_backend.shared.observability import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
