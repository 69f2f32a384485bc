"""FastAPI application and routes."""

from domaincheck.api.app import app, create_app

__all__ = [
    "app",
    "create_app",
]
