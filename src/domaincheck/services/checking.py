"""Check service for single and batch availability lookups."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from domaincheck.core.domains import normalize_domain
from domaincheck.core.exceptions import ProviderError
from domaincheck.core.models import BatchReport, CheckResult
from domaincheck.services.batch import BatchDispatcher

if TYPE_CHECKING:
    from domaincheck.providers.base import AbstractProvider
    from domaincheck.providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class CheckService:
    """
    Entry point for availability checks.

    Single checks go straight through the fallback chain; batches go
    through the BatchDispatcher.
    """

    def __init__(
        self,
        registry: "ProviderRegistry",
        *,
        max_batch_size: int = BatchDispatcher.DEFAULT_MAX_DOMAINS,
        batch_concurrency: int = 20,
    ) -> None:
        """
        Initialize the check service.

        Args:
            registry: Registry holding the configured provider chain
            max_batch_size: Upper bound on domains per batch
            batch_concurrency: Concurrent resolutions within a batch
        """
        self._registry = registry
        self._resolver = registry.get_resolver()
        self._dispatcher = BatchDispatcher(
            self._resolver,
            max_domains=max_batch_size,
            concurrency=batch_concurrency,
        )

    async def check(self, domain: str) -> CheckResult:
        """
        Check a single domain.

        Raises:
            InvalidInputError: If the domain is not a usable string
        """
        normalized = normalize_domain(domain)
        logger.info(f"Checking: {normalized}")

        result = await self._resolver.resolve(normalized)
        if result.domain != domain:
            result = result.model_copy(update={"domain": domain})

        status = "ERROR" if result.is_error else ("AVAILABLE" if result.available else "TAKEN")
        logger.info(f"{normalized}: {status} via {result.provider or 'none'}")
        return result

    @property
    def primary(self) -> "AbstractProvider | None":
        return self._resolver.primary

    async def probe(self, domain: str = "google.com") -> CheckResult:
        """
        Check a domain against the primary provider alone, bypassing fallback.

        Raises:
            ProviderError: If no provider is configured or the primary fails
        """
        primary = self.primary
        if primary is None:
            raise ProviderError("No providers configured", source="none")

        return await primary.check_one(domain)

    async def check_batch(self, domains: Sequence[str]) -> BatchReport:
        """
        Check a batch of domains.

        Raises:
            InvalidInputError: If the batch is malformed or too large
        """
        return await self._dispatcher.dispatch(domains)
