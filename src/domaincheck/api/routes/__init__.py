"""API route modules."""

from domaincheck.api.routes.check import router as check_router
from domaincheck.api.routes.health import router as health_router
from domaincheck.api.routes.info import router as info_router
from domaincheck.api.routes.usage import router as usage_router

__all__ = [
    "check_router",
    "health_router",
    "info_router",
    "usage_router",
]
