"""User management backend package wiring and entrypoints."""

from user_management_backend.main import run_dev, run_prod
from user_management_backend.settings import BackendSettings, get_settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
]
