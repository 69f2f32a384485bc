"""Provider registry for building the configured provider chain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domaincheck.core.exceptions import DomainCheckError
from domaincheck.core.types import ProviderName
from domaincheck.providers.base import AbstractProvider, ProviderConfig
from domaincheck.providers.chain import FallbackResolver
from domaincheck.providers.ratelimit import RateLimitConfig, RateLimiter

if TYPE_CHECKING:
    from domaincheck.config import DomainCheckSettings

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Factory for creating and owning provider instances.

    Each rate-limited provider gets exactly one RateLimiter, created here
    at startup and handed to the provider; the registry keeps a handle
    for health reporting.
    """

    def __init__(self) -> None:
        self._providers: list[AbstractProvider] = []
        self._rate_limiters: dict[ProviderName, RateLimiter] = {}

    def register(self, provider: AbstractProvider) -> None:
        """Append a provider to the end of the fallback chain."""
        self._providers.append(provider)
        if provider.rate_limiter is not None:
            self._rate_limiters[provider.name] = provider.rate_limiter

    @property
    def providers(self) -> list[AbstractProvider]:
        return list(self._providers)

    @property
    def rate_limiters(self) -> dict[ProviderName, RateLimiter]:
        return dict(self._rate_limiters)

    def get(self, name: ProviderName) -> AbstractProvider | None:
        return next((p for p in self._providers if p.name == name), None)

    def get_resolver(self) -> FallbackResolver:
        """Get a fallback resolver over the registered chain."""
        return FallbackResolver(self._providers)

    @classmethod
    def from_settings(cls, settings: "DomainCheckSettings") -> "ProviderRegistry":
        """
        Create a registry with providers configured from settings.

        Providers are registered in ``provider_order``; those missing
        credentials are skipped.
        """
        registry = cls()

        for name in dict.fromkeys(settings.provider_order):
            provider = registry._build_provider(name, settings)
            if provider is None:
                logger.info(f"Provider {name} not configured, skipping")
                continue
            registry.register(provider)

        order = ", ".join(p.name for p in registry.providers) or "none"
        logger.info(f"Provider chain: {order}")
        return registry

    def _build_provider(
        self,
        name: ProviderName,
        settings: "DomainCheckSettings",
    ) -> AbstractProvider | None:
        if name == ProviderName.NAMECOM:
            return self._build_namecom(settings)
        elif name == ProviderName.GODADDY:
            return self._build_godaddy(settings)
        elif name == ProviderName.RDAP:
            return self._build_rdap(settings)
        else:
            raise ValueError(f"Unsupported provider: {name}")

    def _build_namecom(self, settings: "DomainCheckSettings") -> AbstractProvider | None:
        from domaincheck.providers.namecom import NAMECOM_BASE_URLS, NamecomProvider

        if not settings.namecom_configured:
            return None

        username, token = settings.namecom_credentials
        rate_limit = RateLimitConfig(
            per_second=settings.namecom_rate_limit_per_second,
            per_hour=settings.namecom_rate_limit_per_hour,
        )
        return NamecomProvider(
            ProviderConfig(
                base_url=NAMECOM_BASE_URLS[settings.namecom_environment],
                username=username,
                api_key=token,
                rate_limit=rate_limit,
            ),
            rate_limiter=RateLimiter(rate_limit, source=ProviderName.NAMECOM.value),
        )

    def _build_godaddy(self, settings: "DomainCheckSettings") -> AbstractProvider | None:
        from domaincheck.providers.godaddy import GODADDY_BASE_URLS, GoDaddyProvider

        if not settings.godaddy_configured:
            return None

        rate_limit = RateLimitConfig(
            per_second=settings.godaddy_rate_limit_per_second,
            per_hour=settings.godaddy_rate_limit_per_hour,
        )
        return GoDaddyProvider(
            ProviderConfig(
                base_url=GODADDY_BASE_URLS[settings.godaddy_environment],
                api_key=settings.godaddy_api_key,
                api_secret=settings.godaddy_api_secret,
                rate_limit=rate_limit if rate_limit.is_limited else None,
            ),
            rate_limiter=(
                RateLimiter(rate_limit, source=ProviderName.GODADDY.value)
                if rate_limit.is_limited
                else None
            ),
        )

    def _build_rdap(self, settings: "DomainCheckSettings") -> AbstractProvider | None:
        from domaincheck.providers.rdap import RDAPProvider

        if not settings.rdap_enabled:
            return None
        return RDAPProvider(endpoints=settings.rdap_endpoints)

    async def load_rdap_bootstrap(self) -> None:
        """Extend the RDAP suffix table from IANA, if RDAP is registered."""
        from domaincheck.providers.rdap import RDAPProvider

        rdap = self.get(ProviderName.RDAP)
        if not isinstance(rdap, RDAPProvider):
            return
        try:
            await rdap.refresh_bootstrap()
        except DomainCheckError as e:
            logger.warning(f"Failed to load RDAP bootstrap: {e}")

    async def close_all(self) -> None:
        """Close all registered providers."""
        for provider in self._providers:
            await provider.close()
