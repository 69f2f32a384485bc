"""Fallback resolution across an ordered provider chain."""

from __future__ import annotations

import logging
from typing import Sequence

from domaincheck.core.exceptions import DomainCheckError
from domaincheck.core.models import CheckResult
from domaincheck.core.types import ProviderName
from domaincheck.providers.base import AbstractProvider

logger = logging.getLogger(__name__)


class FallbackResolver:
    """
    Resolves one domain by trying providers in a fixed priority order.

    The first provider to return a result wins. Any failure (unsupported
    suffix, timeout, upstream error, exhausted quota) moves on to the
    next provider. When every provider fails the resolver returns an
    error-sentinel CheckResult instead of raising, so callers always get
    exactly one result per domain.
    """

    def __init__(self, providers: Sequence[AbstractProvider]) -> None:
        # Order is the caller's priority order; disabled providers drop out
        self._providers = [p for p in providers if p.is_enabled]

    @property
    def providers(self) -> list[AbstractProvider]:
        return list(self._providers)

    @property
    def primary(self) -> AbstractProvider | None:
        return self._providers[0] if self._providers else None

    def without(self, name: ProviderName) -> FallbackResolver:
        """A resolver over the same chain minus one provider."""
        return FallbackResolver([p for p in self._providers if p.name != name])

    async def resolve(self, domain: str) -> CheckResult:
        """Return the first provider's result, or an error sentinel."""
        if not self._providers:
            return CheckResult.failed(domain, "No providers configured")

        failures: list[str] = []
        for provider in self._providers:
            try:
                return await provider.check_one(domain)
            except DomainCheckError as e:
                logger.warning(f"{provider.name} failed for {domain}: {e}")
                failures.append(f"{provider.name}: {e}")
            except Exception as e:
                logger.exception(f"{provider.name} raised unexpectedly for {domain}: {e}")
                failures.append(f"{provider.name}: {str(e) or type(e).__name__}")

        logger.info(f"All providers failed for {domain}")
        return CheckResult.failed(domain, "; ".join(failures))

    async def close(self) -> None:
        """Close all providers."""
        for provider in self._providers:
            await provider.close()

    async def __aenter__(self) -> "FallbackResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
