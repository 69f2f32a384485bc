"""Domaincheck - Domain availability checking across registrars and RDAP."""

from domaincheck.client import DomainCheckClient, check_domain, check_domains
from domaincheck.core.models import BatchReport, CheckResult
from domaincheck.core.types import CheckMethod, ProviderName, SpeedTier
from domaincheck.providers.chain import FallbackResolver
from domaincheck.providers.ratelimit import RateLimitConfig, RateLimiter

__version__ = "2.0.0"
__all__ = [
    # Client
    "DomainCheckClient",
    "check_domain",
    "check_domains",
    # Types
    "CheckMethod",
    "ProviderName",
    "SpeedTier",
    # Models
    "BatchReport",
    "CheckResult",
    # Providers
    "FallbackResolver",
    "RateLimitConfig",
    "RateLimiter",
    # Version
    "__version__",
]
