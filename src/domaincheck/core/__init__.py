"""Core types, models, and utilities."""

from .domains import domain_suffix, normalize_domain
from .exceptions import (
    DomainCheckError,
    InvalidInputError,
    ProviderError,
    RateLimitExceededError,
    UnsupportedDomainError,
    UpstreamError,
    UpstreamTimeoutError,
    UsageSinkError,
)
from .models import BatchReport, CheckResult
from .types import (
    CheckMethod,
    GoDaddyEnvironment,
    NamecomEnvironment,
    ProviderName,
    SpeedTier,
)

__all__ = [
    # Types
    "CheckMethod",
    "GoDaddyEnvironment",
    "NamecomEnvironment",
    "ProviderName",
    "SpeedTier",
    # Models
    "BatchReport",
    "CheckResult",
    # Domains
    "domain_suffix",
    "normalize_domain",
    # Exceptions
    "DomainCheckError",
    "InvalidInputError",
    "ProviderError",
    "RateLimitExceededError",
    "UnsupportedDomainError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "UsageSinkError",
]
