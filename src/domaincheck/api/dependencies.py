"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from domaincheck.config import DomainCheckSettings
from domaincheck.providers.registry import ProviderRegistry
from domaincheck.services.checking import CheckService
from domaincheck.services.usage import AirtableUsageSink


@lru_cache
def get_settings() -> DomainCheckSettings:
    """Get cached application settings."""
    return DomainCheckSettings()


async def get_provider_registry(request: Request) -> ProviderRegistry:
    """Get provider registry from app state."""
    return request.app.state.provider_registry


async def get_check_service(request: Request) -> CheckService:
    """Get check service from app state."""
    return request.app.state.check_service


async def get_usage_sink(request: Request) -> AirtableUsageSink | None:
    """Get the Airtable usage sink, if configured."""
    return getattr(request.app.state, "usage_sink", None)


# Type aliases for cleaner dependency injection
Settings = Annotated[DomainCheckSettings, Depends(get_settings)]
Providers = Annotated[ProviderRegistry, Depends(get_provider_registry)]
Checker = Annotated[CheckService, Depends(get_check_service)]
UsageSink = Annotated[AirtableUsageSink | None, Depends(get_usage_sink)]
