"""Domain models for availability checks."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator

from .types import CheckMethod, ProviderName, SpeedTier

# Exact in Python. JSON output is a float, matching the numeric prices
# the registrar APIs send
Price = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CheckResult(BaseModel):
    """Normalized availability outcome for a single domain."""

    model_config = ConfigDict(frozen=True)

    domain: str = Field(..., description="Fully-qualified domain name")
    available: bool = Field(..., description="Whether the domain can be registered")
    method: CheckMethod = Field(..., description="Lookup path that produced this result")
    price: Price | None = Field(default=None, description="Registration price")
    renewal_price: Price | None = Field(default=None, description="Renewal price")
    premium: bool = Field(default=False, description="Premium pricing tier")
    error: str | None = Field(default=None, description="Failure detail (error results only)")

    provider: ProviderName | None = Field(default=None, description="Provider that answered")
    speed: SpeedTier | None = Field(default=None, description="Declared provider speed")
    tld: str | None = Field(default=None, description="Top-level domain")
    purchase_type: str | None = Field(default=None, description="Registrar purchase type")
    currency: str | None = Field(default=None, description="Currency of the prices")

    @model_validator(mode="after")
    def _check_error_invariant(self) -> Self:
        if self.method == CheckMethod.ERROR:
            if not self.error:
                raise ValueError("error results require an error detail")
            if self.available:
                raise ValueError("error results cannot be available")
        elif self.error is not None:
            raise ValueError("only error results may carry an error detail")
        return self

    @property
    def is_error(self) -> bool:
        return self.method == CheckMethod.ERROR

    @classmethod
    def failed(
        cls,
        domain: str,
        error: str,
        provider: ProviderName | None = None,
    ) -> CheckResult:
        """Build the error sentinel for a domain no provider could answer."""
        return cls(
            domain=domain,
            available=False,
            method=CheckMethod.ERROR,
            error=error or "Unknown error",
            provider=provider,
        )


class BatchReport(BaseModel):
    """Ordered batch results plus summary counters."""

    results: list[CheckResult] = Field(default_factory=list)
    total_checked: int = 0
    available_count: int = 0
    unavailable_count: int = 0
    error_count: int = 0
    duration_ms: float = 0.0
    provider: ProviderName | None = Field(
        default=None, description="Batch provider, or None for per-domain fallback"
    )

    @classmethod
    def from_results(
        cls,
        results: list[CheckResult],
        duration_ms: float,
        provider: ProviderName | None = None,
    ) -> BatchReport:
        available = sum(1 for r in results if r.available)
        return cls(
            results=results,
            total_checked=len(results),
            available_count=available,
            unavailable_count=len(results) - available,
            error_count=sum(1 for r in results if r.is_error),
            duration_ms=duration_ms,
            provider=provider,
        )
