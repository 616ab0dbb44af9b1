"""Shared dependencies for API endpoints."""

from fastapi import HTTPException, Request

from ..config import Settings, get_settings
from ..core.engine import SearchEngine


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_engine(request: Request) -> SearchEngine:
    """Return the engine loaded at startup, or fail with 503 if loading failed."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        load_error = getattr(request.app.state, "load_error", None)
        raise HTTPException(
            status_code=503,
            detail=f"Icon index not loaded: {load_error or 'unknown error'}"
        )
    return engine
