"""Response schemas for API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from domaincheck.api.schemas.base import APIBaseSchema
from domaincheck.core.models import Price
from domaincheck.core.types import CheckMethod, ProviderName, SpeedTier


# Check results
class CheckResultResponse(APIBaseSchema):
    """Availability of a single domain."""

    domain: str
    available: bool
    method: CheckMethod
    price: Price | None = None
    renewal_price: Price | None = None
    premium: bool = False
    error: str | None = None
    provider: ProviderName | None = None
    speed: SpeedTier | None = None
    tld: str | None = None
    purchase_type: str | None = None
    currency: str | None = None


class BatchCheckResponse(APIBaseSchema):
    """Ordered batch results with summary counters."""

    success: bool = True
    results: list[CheckResultResponse]
    total_checked: int
    available_count: int
    unavailable_count: int
    error_count: int
    duration_ms: float
    provider: ProviderName | None = None


# Usage logging
class UsageResponse(APIBaseSchema):
    """Acknowledgement of a recorded usage event."""

    success: bool = True
    message: str = "Usage logged successfully"
    record_id: str
    timestamp: datetime


# Health checks
class RateLimitResponse(APIBaseSchema):
    """Limits and live counters of one provider's rate limiter."""

    per_second: int | None = None
    per_hour: int | None = None
    current_second: int
    current_hour: int


class HealthResponse(APIBaseSchema):
    """Basic health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    providers: list[ProviderName] = Field(default_factory=list)
    error: str | None = None
    timestamp: datetime


class DetailedHealthResponse(APIBaseSchema):
    """Health check response including a live upstream probe."""

    status: Literal["healthy", "unhealthy"]
    provider: ProviderName | None = None
    base_url: str | None = None
    api_test: Literal["passed", "failed"]
    error: str | None = None
    rate_limits: RateLimitResponse | None = None
    timestamp: datetime


# Service info
class InfoResponse(APIBaseSchema):
    """Service description returned at the root path."""

    name: str
    version: str
    providers: list[ProviderName]
    environments: dict[str, str]
    status: Literal["configured", "missing credentials"]
    endpoints: dict[str, str]
