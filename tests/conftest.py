"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import ClassVar, Sequence

import pytest

from domaincheck.config import DomainCheckSettings
from domaincheck.core.exceptions import UnsupportedDomainError
from domaincheck.core.models import CheckResult
from domaincheck.core.types import CheckMethod, ProviderName
from domaincheck.providers.base import AbstractProvider, BatchProvider, ProviderConfig


# ============================================================================
# Stub Providers
# ============================================================================


class StubProvider(AbstractProvider):
    """
    In-memory provider for exercising the chain without HTTP.

    ``available`` maps domains to availability; ``errors`` maps domains to
    the exception to raise. Any other domain raises UnsupportedDomainError.
    """

    BASE_URL: ClassVar[str] = "https://stub.test"

    def __init__(
        self,
        name: ProviderName = ProviderName.RDAP,
        method: CheckMethod = CheckMethod.RDAP,
        available: dict[str, bool] | None = None,
        errors: dict[str, Exception] | None = None,
        *,
        fail_with: Exception | None = None,
        enabled: bool = True,
    ) -> None:
        super().__init__(ProviderConfig(enabled=enabled))
        self.PROVIDER_NAME = name
        self.METHOD = method
        self.available = available or {}
        self.errors = errors or {}
        self.fail_with = fail_with
        self.calls: list[str] = []

    async def check_one(self, domain: str) -> CheckResult:
        self.calls.append(domain)
        if self.fail_with is not None:
            raise self.fail_with
        if domain in self.errors:
            raise self.errors[domain]
        if domain in self.available:
            return self._result(domain, self.available[domain])
        raise UnsupportedDomainError(f"{self.name} cannot check {domain}", source=self.name.value)


class StubBatchProvider(BatchProvider):
    """In-memory batch provider; records every batch it is sent."""

    BASE_URL: ClassVar[str] = "https://stub-batch.test"

    def __init__(
        self,
        name: ProviderName = ProviderName.NAMECOM,
        available: dict[str, bool] | None = None,
        *,
        fail_with: Exception | None = None,
        enabled: bool = True,
    ) -> None:
        super().__init__(ProviderConfig(enabled=enabled))
        self.PROVIDER_NAME = name
        self.METHOD = CheckMethod.REGISTRAR
        self.available = available or {}
        self.fail_with = fail_with
        self.batches: list[list[str]] = []

    async def check_batch(self, domains: Sequence[str]) -> list[CheckResult]:
        self.batches.append(list(domains))
        if self.fail_with is not None:
            raise self.fail_with
        results = [
            self._result(domain, self.available[domain])
            for domain in domains
            if domain in self.available
        ]
        return self._in_request_order(domains, list(reversed(results)))


@pytest.fixture
def make_provider() -> type[StubProvider]:
    """Factory for single-domain stub providers."""
    return StubProvider


@pytest.fixture
def make_batch_provider() -> type[StubBatchProvider]:
    """Factory for batch-capable stub providers."""
    return StubBatchProvider


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> DomainCheckSettings:
    """Create settings with every provider configured."""
    return DomainCheckSettings(
        _env_file=None,
        namecom_test_username="sandbox-user",
        namecom_test_api_token="sandbox-token",
        godaddy_api_key="gd-key",
        godaddy_api_secret="gd-secret",
        airtable_api_key="at-key",
        airtable_base_id="appBase123",
    )


@pytest.fixture
def mock_settings_minimal() -> DomainCheckSettings:
    """Create settings with only the keyless RDAP provider."""
    return DomainCheckSettings(_env_file=None)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def namecom_results() -> dict:
    """Sample Name.com checkAvailability response."""
    return {
        "results": [
            {
                "domainName": "taken-example.com",
                "sld": "taken-example",
                "tld": "com",
                "purchasable": False,
            },
            {
                "domainName": "fresh-example.com",
                "sld": "fresh-example",
                "tld": "com",
                "purchasable": True,
                "purchasePrice": 12.99,
                "purchaseType": "registration",
                "renewalPrice": 14.99,
            },
        ]
    }
