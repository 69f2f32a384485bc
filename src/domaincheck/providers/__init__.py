"""Provider layer for querying upstream availability sources."""

from domaincheck.providers.base import (
    AbstractProvider,
    BatchProvider,
    ProviderConfig,
)
from domaincheck.providers.chain import FallbackResolver
from domaincheck.providers.godaddy import GoDaddyProvider
from domaincheck.providers.namecom import NamecomProvider
from domaincheck.providers.ratelimit import RateLimitConfig, RateLimiter
from domaincheck.providers.rdap import RDAPProvider
from domaincheck.providers.registry import ProviderRegistry

__all__ = [
    # Base
    "AbstractProvider",
    "BatchProvider",
    "ProviderConfig",
    # Rate limiting
    "RateLimitConfig",
    "RateLimiter",
    # Providers
    "GoDaddyProvider",
    "NamecomProvider",
    "RDAPProvider",
    # Chain
    "FallbackResolver",
    # Registry
    "ProviderRegistry",
]
