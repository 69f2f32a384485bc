"""Abstract provider base with HTTP client management and rate limiting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar, Sequence

import httpx
from pydantic import BaseModel, ConfigDict

from domaincheck.core.domains import domain_suffix
from domaincheck.core.exceptions import UpstreamError, UpstreamTimeoutError
from domaincheck.core.models import CheckResult
from domaincheck.core.types import CheckMethod, ProviderName, SpeedTier
from domaincheck.providers.ratelimit import RateLimitConfig, RateLimiter

# Per speed tier, in seconds
DEFAULT_TIMEOUTS: dict[SpeedTier, float] = {
    SpeedTier.FAST: 5.0,
    SpeedTier.STANDARD: 10.0,
    SpeedTier.SLOW: 20.0,
}


class ProviderConfig(BaseModel):
    """Static connection data for a provider."""

    model_config = ConfigDict(frozen=True)

    base_url: str | None = None
    username: str | None = None
    api_key: str | None = None
    api_secret: str | None = None
    speed: SpeedTier | None = None
    timeout: float | None = None
    rate_limit: RateLimitConfig | None = None
    enabled: bool = True


class AbstractProvider(ABC):
    """
    Abstract base class for all availability providers.

    Provides:
    - HTTP client management with connection pooling
    - Rate limiter gating before every upstream call
    - Translation of transport failures into typed provider errors
    """

    # Class-level configuration (to be overridden by subclasses)
    PROVIDER_NAME: ClassVar[ProviderName]
    METHOD: ClassVar[CheckMethod]
    BASE_URL: ClassVar[str]
    DEFAULT_SPEED: ClassVar[SpeedTier] = SpeedTier.STANDARD

    def __init__(
        self,
        config: ProviderConfig | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self.config = config or ProviderConfig()
        self._rate_limiter = rate_limiter
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> ProviderName:
        """The provider identity."""
        return self.PROVIDER_NAME

    @property
    def speed(self) -> SpeedTier:
        return self.config.speed or self.DEFAULT_SPEED

    @property
    def timeout(self) -> float:
        """Network timeout, derived from the speed tier unless configured."""
        if self.config.timeout is not None:
            return self.config.timeout
        return DEFAULT_TIMEOUTS[self.speed]

    @property
    def base_url(self) -> str:
        return self.config.base_url or self.BASE_URL

    @property
    def is_enabled(self) -> bool:
        return self.config.enabled

    @property
    def rate_limiter(self) -> RateLimiter | None:
        return self._rate_limiter

    @property
    def supports_batch(self) -> bool:
        return isinstance(self, BatchProvider)

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_default_headers(),
                auth=self._get_auth(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(
                message=f"{self.name} timed out after {self.timeout:g}s",
                source=self.name.value,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(
                message=f"HTTP error: {e}",
                source=self.name.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests. Override to add auth."""
        return {
            "User-Agent": "domaincheck/2.0",
            "Accept": "application/json",
        }

    def _get_auth(self) -> httpx.Auth | None:
        """Client-level authentication. Override for account-keyed providers."""
        return None

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an HTTP request, gated by the provider's rate limiter."""
        if self._rate_limiter is not None:
            await self._rate_limiter.acquire()

        async with self._get_client() as client:
            return await client.request(method, url, **kwargs)

    def _upstream_error(
        self,
        response: httpx.Response,
        message: str | None = None,
    ) -> UpstreamError:
        """Build an UpstreamError that keeps the response status."""
        if message is None:
            message = f"{self.name} API error: {_response_message(response)}"
        return UpstreamError(
            message=message,
            source=self.name.value,
            status_code=response.status_code,
        )

    def _result(self, domain: str, available: bool, **fields: Any) -> CheckResult:
        """Build a successful result stamped with this provider's identity."""
        if not fields.get("tld"):
            fields["tld"] = domain_suffix(domain)
        return CheckResult(
            domain=domain,
            available=available,
            method=self.METHOD,
            provider=self.name,
            speed=self.speed,
            **fields,
        )

    # Abstract methods
    @abstractmethod
    async def check_one(self, domain: str) -> CheckResult:
        """
        Check availability of a single normalized domain.

        Raises:
            UnsupportedDomainError: No route for the domain's suffix
            UpstreamTimeoutError: The upstream call timed out
            UpstreamError: Transport failure or unusable response
            RateLimitExceededError: Local hourly quota exhausted
        """
        ...

    async def __aenter__(self) -> "AbstractProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class BatchProvider(AbstractProvider):
    """Provider with a native multi-domain lookup."""

    MAX_BATCH_SIZE: ClassVar[int] = 100

    @abstractmethod
    async def check_batch(self, domains: Sequence[str]) -> list[CheckResult]:
        """Check many domains in one upstream call, preserving input order."""
        ...

    async def check_one(self, domain: str) -> CheckResult:
        result = (await self.check_batch([domain]))[0]
        if result.is_error:
            # A single lookup without an answer is a provider failure
            raise UpstreamError(message=result.error or "No result", source=self.name.value)
        return result

    def _in_request_order(
        self,
        domains: Sequence[str],
        results: Sequence[CheckResult],
    ) -> list[CheckResult]:
        """Re-sort upstream results to match the requested order."""
        by_domain = {result.domain: result for result in results}
        return [
            by_domain.get(domain)
            or CheckResult.failed(
                domain,
                f"{self.name} returned no result for this domain",
                provider=self.name,
            )
            for domain in domains
        ]


def _response_message(response: httpx.Response) -> str:
    """Best-effort error message from an upstream response body."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase or "Unknown error"

    if isinstance(data, dict):
        for key in ("message", "details", "description", "error"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return response.reason_phrase or "Unknown error"
