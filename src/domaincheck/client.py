"""Main library client for standalone usage."""

from __future__ import annotations

import logging
from typing import Sequence

from domaincheck.config import DomainCheckSettings
from domaincheck.core.models import BatchReport, CheckResult
from domaincheck.providers.registry import ProviderRegistry
from domaincheck.services.checking import CheckService

logger = logging.getLogger(__name__)


class DomainCheckClient:
    """
    Main client for the domaincheck library.

    Checks domain availability against the configured provider chain
    without requiring the web server.

    Usage:
        async with DomainCheckClient() as client:
            # Single domain
            result = await client.check("example.com")

            # Up to 100 domains at once
            report = await client.check_batch(["example.com", "example.net"])

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: DomainCheckSettings | None = None,
        *,
        registry: ProviderRegistry | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            registry: Pre-built provider registry (skips building from settings).
        """
        self._settings = settings or DomainCheckSettings()
        self._registry = registry
        self._service: CheckService | None = None

    async def __aenter__(self) -> DomainCheckClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        if self._registry is None:
            self._registry = ProviderRegistry.from_settings(self._settings)

            if self._settings.rdap_bootstrap_on_startup:
                await self._registry.load_rdap_bootstrap()

        self._service = CheckService(
            self._registry,
            max_batch_size=self._settings.max_batch_size,
            batch_concurrency=self._settings.batch_concurrency,
        )

    async def close(self) -> None:
        """Close all resources."""
        if self._registry:
            await self._registry.close_all()
            self._registry = None
        self._service = None

    def _ensure_initialized(self) -> CheckService:
        """Ensure client is initialized."""
        if self._service is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with DomainCheckClient() as client:'"
            )
        return self._service

    async def check(self, domain: str) -> CheckResult:
        """Check availability of a single domain."""
        return await self._ensure_initialized().check(domain)

    async def check_batch(self, domains: Sequence[str]) -> BatchReport:
        """Check availability of up to ``max_batch_size`` domains."""
        return await self._ensure_initialized().check_batch(domains)


# Convenience functions for one-off checks
async def check_domain(
    domain: str,
    *,
    settings: DomainCheckSettings | None = None,
) -> CheckResult:
    """
    Check a single domain (convenience function).

    For multiple checks, use DomainCheckClient for better performance.
    """
    async with DomainCheckClient(settings) as client:
        return await client.check(domain)


async def check_domains(
    domains: Sequence[str],
    *,
    settings: DomainCheckSettings | None = None,
) -> BatchReport:
    """
    Check a batch of domains (convenience function).

    For repeated batches, use DomainCheckClient for better performance.
    """
    async with DomainCheckClient(settings) as client:
        return await client.check_batch(domains)
