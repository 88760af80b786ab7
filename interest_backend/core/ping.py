"""Ping utility used by the API health-check."""

from interest_backend.config import Settings


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_app_label(settings: Settings) -> str:
    """Name and environment the running app reports about itself."""
    return f"{settings.app_name} ({settings.app_env})"
