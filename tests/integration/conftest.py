"""Integration test fixtures for the HTTP application."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from domaincheck.api.app import create_app
from domaincheck.api.dependencies import get_settings
from domaincheck.config import DomainCheckSettings
from domaincheck.core.types import CheckMethod, ProviderName
from domaincheck.providers.ratelimit import RateLimitConfig, RateLimiter
from domaincheck.providers.registry import ProviderRegistry
from domaincheck.services.checking import CheckService
from domaincheck.services.usage import AirtableUsageSink


# ============================================================================
# Provider Fixtures
# ============================================================================


@pytest.fixture
def namecom_stub(make_batch_provider):
    """Batch registrar stub with a rate limiter attached."""
    provider = make_batch_provider(
        ProviderName.NAMECOM,
        available={"google.com": False, "fresh-example.com": True},
    )
    provider._rate_limiter = RateLimiter(RateLimitConfig(per_second=20, per_hour=3000), source="namecom")
    return provider


@pytest.fixture
def rdap_stub(make_provider):
    """RDAP stub that knows google.com."""
    return make_provider(ProviderName.RDAP, CheckMethod.RDAP, available={"google.com": False})


@pytest.fixture
def registry(namecom_stub, rdap_stub) -> ProviderRegistry:
    """Registry with a batch registrar in front of RDAP."""
    registry = ProviderRegistry()
    registry.register(namecom_stub)
    registry.register(rdap_stub)
    return registry


@pytest.fixture
def usage_sink() -> AirtableUsageSink:
    """Airtable sink pointed at the real API host (mocked with respx)."""
    return AirtableUsageSink("at-key", "appBase123")


# ============================================================================
# Application Fixtures
# ============================================================================


def build_app(
    registry: ProviderRegistry,
    settings: DomainCheckSettings,
    usage_sink: AirtableUsageSink | None = None,
) -> FastAPI:
    app = create_app(cors_origins=["*"])
    app.dependency_overrides[get_settings] = lambda: settings
    app.state.provider_registry = registry
    app.state.check_service = CheckService(registry)
    app.state.usage_sink = usage_sink
    return app


@pytest.fixture
def app(registry: ProviderRegistry, mock_settings: DomainCheckSettings, usage_sink) -> FastAPI:
    """Application wired to stub providers."""
    return build_app(registry, mock_settings, usage_sink)


@pytest.fixture
async def test_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client for the application, without running its lifespan."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def empty_client(mock_settings_minimal: DomainCheckSettings) -> AsyncIterator[AsyncClient]:
    """HTTP client for an application with no providers and no usage sink."""
    app = build_app(ProviderRegistry(), mock_settings_minimal)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
