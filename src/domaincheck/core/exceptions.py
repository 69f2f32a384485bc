"""Custom exception hierarchy for domaincheck."""

from typing import Any


class DomainCheckError(Exception):
    """Base exception for all domaincheck errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputError(DomainCheckError):
    """Malformed or out-of-bound check request."""

    pass


class ProviderError(DomainCheckError):
    """A single provider could not produce a result."""

    def __init__(
        self,
        message: str,
        source: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source


class UnsupportedDomainError(ProviderError):
    """No route exists for the domain's suffix."""

    pass


class UpstreamTimeoutError(ProviderError):
    """Upstream call exceeded its deadline."""

    pass


class UpstreamError(ProviderError):
    """Transport failure or unusable response from a provider."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, source, details)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class RateLimitExceededError(ProviderError):
    """Local quota for a provider is exhausted."""

    def __init__(
        self,
        message: str,
        source: str,
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, source, details)
        self.retry_after = retry_after


class UsageSinkError(DomainCheckError):
    """Usage event could not be recorded."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
