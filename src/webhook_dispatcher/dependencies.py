"""FastAPI dependencies."""

from fastapi import Request

from webhook_dispatcher.config import Settings, get_settings


def get_app_settings(request: Request) -> Settings:
    """Return the settings injected into the app, or the cached process settings."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        return get_settings()
    return settings
