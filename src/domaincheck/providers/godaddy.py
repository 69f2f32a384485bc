"""GoDaddy registrar provider implementation."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar

import httpx

from domaincheck.core.exceptions import UnsupportedDomainError
from domaincheck.core.models import CheckResult
from domaincheck.core.types import CheckMethod, GoDaddyEnvironment, ProviderName, SpeedTier
from domaincheck.providers.base import AbstractProvider, ProviderConfig
from domaincheck.providers.ratelimit import RateLimiter

GODADDY_BASE_URLS: dict[GoDaddyEnvironment, str] = {
    GoDaddyEnvironment.OTE: "https://api.ote-godaddy.com",
    GoDaddyEnvironment.PRODUCTION: "https://api.godaddy.com",
}

# Prices are reported in micro-units of the currency
PRICE_MICROS = Decimal(1_000_000)

_UNSUPPORTED_CODES = frozenset({"UNSUPPORTED_TLD", "INVALID_TLD"})


class GoDaddyProvider(AbstractProvider):
    """
    GoDaddy Domains API v1 resolver (authenticated, single-domain).

    API Documentation: https://developer.godaddy.com/doc/endpoint/domains

    Requires an API key and secret sent as an ``sso-key`` header.
    """

    PROVIDER_NAME: ClassVar[ProviderName] = ProviderName.GODADDY
    METHOD: ClassVar[CheckMethod] = CheckMethod.REGISTRAR
    BASE_URL: ClassVar[str] = GODADDY_BASE_URLS[GoDaddyEnvironment.OTE]
    DEFAULT_SPEED: ClassVar[SpeedTier] = SpeedTier.STANDARD

    def __init__(
        self,
        config: ProviderConfig | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        super().__init__(config, rate_limiter)
        if not config or not config.api_key or not config.api_secret:
            raise ValueError("GoDaddy requires an API key and secret")

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["Authorization"] = f"sso-key {self.config.api_key}:{self.config.api_secret}"
        return headers

    async def check_one(self, domain: str) -> CheckResult:
        """Check a single domain with the FAST availability check."""
        response = await self._make_request(
            "GET",
            "/v1/domains/available",
            params={"domain": domain, "checkType": "FAST"},
        )

        if not response.is_success:
            data = _safe_json(response)
            if data.get("code") in _UNSUPPORTED_CODES:
                raise UnsupportedDomainError(
                    message=data.get("message") or f"GoDaddy does not support {domain}",
                    source=self.name.value,
                    details={"domain": domain, "code": data.get("code")},
                )
            raise self._upstream_error(response)

        data = _safe_json(response)
        if not isinstance(data.get("available"), bool):
            raise self._upstream_error(response, "Malformed GoDaddy response: no availability")

        price = data.get("price")
        return self._result(
            str(data.get("domain") or domain).lower(),
            available=data["available"],
            price=Decimal(price) / PRICE_MICROS if isinstance(price, int) else None,
            currency=data.get("currency"),
        )


def _safe_json(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
