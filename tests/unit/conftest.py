"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import pytest
import respx

from domaincheck.providers.base import ProviderConfig
from domaincheck.providers.ratelimit import RateLimitConfig


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Provider Configuration Fixtures
# ============================================================================


@pytest.fixture
def namecom_config() -> ProviderConfig:
    """Create a Name.com sandbox config for testing."""
    return ProviderConfig(
        base_url="https://api.dev.name.com",
        username="sandbox-user",
        api_key="sandbox-token",
        rate_limit=RateLimitConfig(per_second=20, per_hour=3000),
    )


@pytest.fixture
def godaddy_config() -> ProviderConfig:
    """Create a GoDaddy OTE config for testing."""
    return ProviderConfig(
        base_url="https://api.ote-godaddy.com",
        api_key="gd-key",
        api_secret="gd-secret",
    )


# ============================================================================
# Fake Clock
# ============================================================================


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    """Deterministic clock and sleep for rate limiter tests."""
    return FakeClock()
