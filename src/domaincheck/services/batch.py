"""Concurrent batch dispatch over the provider chain."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Sequence

from domaincheck.core.domains import normalize_domain
from domaincheck.core.exceptions import DomainCheckError, InvalidInputError
from domaincheck.core.models import BatchReport, CheckResult
from domaincheck.providers.base import BatchProvider
from domaincheck.providers.chain import FallbackResolver

logger = logging.getLogger(__name__)


class BatchDispatcher:
    """
    Fans a bounded list of domains out to the provider chain.

    When the primary provider has a native batch lookup, the whole list
    goes out in one call and entries it leaves unanswered fall back through
    the rest of the chain; otherwise every domain is resolved through the
    fallback chain concurrently. Either way the report lists results in
    input order and is only built once every domain has an outcome.
    """

    DEFAULT_MAX_DOMAINS = 100

    def __init__(
        self,
        resolver: FallbackResolver,
        *,
        max_domains: int = DEFAULT_MAX_DOMAINS,
        concurrency: int = 20,
    ) -> None:
        self._resolver = resolver
        self._max_domains = max_domains
        self._concurrency = concurrency

    def validate(self, domains: Any, max_domains: int | None = None) -> list[str]:
        """
        Check the batch shape and normalize every entry.

        Raises:
            InvalidInputError: Not a list, empty, too long, or a bad entry
        """
        limit = max_domains or self._max_domains

        if not isinstance(domains, (list, tuple)):
            raise InvalidInputError("domains must be an array")
        if not domains:
            raise InvalidInputError("At least one domain is required")
        if len(domains) > limit:
            raise InvalidInputError(
                f"Maximum {limit} domains per request",
                details={"provided": len(domains), "max": limit},
            )

        return [normalize_domain(domain) for domain in domains]

    async def dispatch(
        self,
        domains: Sequence[str],
        max_domains: int | None = None,
    ) -> BatchReport:
        """Check every domain and assemble the aggregate report."""
        normalized = self.validate(domains, max_domains)

        logger.info(f"Batch check: {len(normalized)} domains")
        start = time.monotonic()

        primary = self._resolver.primary
        batch_provider = None

        if isinstance(primary, BatchProvider):
            batch_error: str | None = None
            rest = self._resolver.without(primary.name)
            try:
                results = await self._check_via_batch(primary, normalized)
                batch_provider = primary.name
            except DomainCheckError as e:
                logger.warning(f"Batch call to {primary.name} failed, resolving per domain: {e}")
                batch_error = f"{primary.name}: {e}"
            except Exception as e:
                logger.exception(f"Batch call to {primary.name} raised unexpectedly: {e}")
                batch_error = f"{primary.name}: {str(e) or type(e).__name__}"

            if batch_error is None:
                results = await self._fall_back_errors(normalized, results, rest)
            else:
                results = await self._resolve_each(normalized, rest, batch_error=batch_error)
        else:
            results = await self._resolve_each(normalized, self._resolver)

        # Report each entry under the name the caller sent
        results = [
            result if result.domain == original else result.model_copy(update={"domain": original})
            for original, result in zip(domains, results)
        ]

        duration_ms = (time.monotonic() - start) * 1000
        report = BatchReport.from_results(results, duration_ms, batch_provider)

        logger.info(
            f"Batch complete: {report.available_count}/{report.total_checked} available "
            f"({report.error_count} errors, {duration_ms:.0f}ms)"
        )
        return report

    async def _check_via_batch(
        self,
        provider: BatchProvider,
        domains: list[str],
    ) -> list[CheckResult]:
        """One upstream call per chunk of unique domains, mapped back to input order."""
        unique = list(dict.fromkeys(domains))
        size = provider.MAX_BATCH_SIZE
        chunks = [unique[i : i + size] for i in range(0, len(unique), size)]

        chunk_results = await asyncio.gather(*(provider.check_batch(chunk) for chunk in chunks))

        by_domain = {
            result.domain: result
            for results in chunk_results
            for result in results
        }
        return [by_domain[domain] for domain in domains]

    async def _fall_back_errors(
        self,
        domains: list[str],
        results: list[CheckResult],
        resolver: FallbackResolver,
    ) -> list[CheckResult]:
        """Resolve domains the batch call left unanswered through the rest of the chain."""
        failed = list(dict.fromkeys(d for d, r in zip(domains, results) if r.is_error))
        if not failed or not resolver.providers:
            return results

        logger.info(f"Batch left {len(failed)} domains unanswered, falling back")
        retried = dict(zip(failed, await self._resolve_each(failed, resolver)))

        merged = []
        for domain, result in zip(domains, results):
            if not result.is_error:
                merged.append(result)
                continue
            fallback = retried[domain]
            if fallback.is_error:
                fallback = fallback.model_copy(update={"error": f"{result.error}; {fallback.error}"})
            merged.append(fallback)
        return merged

    async def _resolve_each(
        self,
        domains: list[str],
        resolver: FallbackResolver,
        batch_error: str | None = None,
    ) -> list[CheckResult]:
        """Resolve domains independently, bounded by the concurrency limit."""
        if batch_error and not resolver.providers:
            return [CheckResult.failed(domain, batch_error) for domain in domains]

        semaphore = asyncio.Semaphore(self._concurrency)

        async def resolve(domain: str) -> CheckResult:
            async with semaphore:
                result = await resolver.resolve(domain)
            if batch_error and result.is_error:
                return result.model_copy(update={"error": f"{batch_error}; {result.error}"})
            return result

        # gather preserves argument order
        return list(await asyncio.gather(*(resolve(domain) for domain in domains)))
