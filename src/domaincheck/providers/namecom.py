"""Name.com registrar provider implementation."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Sequence

import httpx

from domaincheck.core.models import CheckResult
from domaincheck.core.types import CheckMethod, NamecomEnvironment, ProviderName, SpeedTier
from domaincheck.providers.base import BatchProvider, ProviderConfig
from domaincheck.providers.ratelimit import RateLimitConfig, RateLimiter

NAMECOM_BASE_URLS: dict[NamecomEnvironment, str] = {
    NamecomEnvironment.SANDBOX: "https://api.dev.name.com",
    NamecomEnvironment.PRODUCTION: "https://api.name.com",
}

# Documented account limits
NAMECOM_RATE_LIMIT = RateLimitConfig(per_second=20, per_hour=3000)

_STATUS_MESSAGES: dict[int, str] = {
    401: "Authentication failed - check API credentials",
    403: "Access denied - disable 2FA on the Name.com account or check IP restrictions",
    429: "Rate limit exceeded - please slow down requests",
}


class NamecomProvider(BatchProvider):
    """
    Name.com API v4 resolver (authenticated, batch-capable).

    API Documentation: https://docs.name.com

    Up to 100 domains per checkAvailability call. Sandbox and production
    accounts use different hosts and credentials.
    """

    PROVIDER_NAME: ClassVar[ProviderName] = ProviderName.NAMECOM
    METHOD: ClassVar[CheckMethod] = CheckMethod.REGISTRAR
    BASE_URL: ClassVar[str] = NAMECOM_BASE_URLS[NamecomEnvironment.SANDBOX]
    DEFAULT_SPEED: ClassVar[SpeedTier] = SpeedTier.STANDARD
    MAX_BATCH_SIZE: ClassVar[int] = 100

    # The colon must stay unencoded
    CHECK_ENDPOINT: ClassVar[str] = "/v4/domains:checkAvailability"

    def __init__(
        self,
        config: ProviderConfig | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        super().__init__(config, rate_limiter)
        if not config or not config.username or not config.api_key:
            raise ValueError("Name.com requires a username and API token")

    def _get_auth(self) -> httpx.Auth:
        return httpx.BasicAuth(self.config.username or "", self.config.api_key or "")

    async def check_batch(self, domains: Sequence[str]) -> list[CheckResult]:
        """Check up to MAX_BATCH_SIZE domains in one call."""
        if len(domains) > self.MAX_BATCH_SIZE:
            raise ValueError(f"Name.com accepts at most {self.MAX_BATCH_SIZE} domains per call")

        response = await self._make_request(
            "POST",
            self.CHECK_ENDPOINT,
            json={"domainNames": list(domains)},
        )

        if response.status_code in _STATUS_MESSAGES:
            raise self._upstream_error(response, _STATUS_MESSAGES[response.status_code])
        if not response.is_success:
            raise self._upstream_error(response)

        try:
            data = response.json()
        except ValueError as e:
            raise self._upstream_error(response, "Malformed Name.com response: invalid JSON") from e

        raw_results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(raw_results, list):
            raise self._upstream_error(response, "Malformed Name.com response: no results")

        parsed = [self._parse_result(item) for item in raw_results if isinstance(item, dict)]
        return self._in_request_order(domains, [r for r in parsed if r is not None])

    def _parse_result(self, data: dict[str, Any]) -> CheckResult | None:
        """Parse one checkAvailability entry into a CheckResult."""
        domain_name = data.get("domainName")
        if not domain_name:
            return None

        return self._result(
            str(domain_name).lower(),
            available=data.get("purchasable") is True,
            price=_to_decimal(data.get("purchasePrice")),
            renewal_price=_to_decimal(data.get("renewalPrice")),
            premium=bool(data.get("premium", False)),
            tld=data.get("tld"),
            purchase_type=data.get("purchaseType"),
        )


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None
