"""Health check endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Response

from domaincheck import __version__
from domaincheck.api.dependencies import Checker, Providers
from domaincheck.api.schemas import DetailedHealthResponse, HealthResponse, RateLimitResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

PROBE_DOMAIN = "google.com"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    operation_id="getHealth",
    summary="Health check",
    description="Report whether any availability provider is configured.",
)
async def health_check(registry: Providers, response: Response) -> HealthResponse:
    """Check API health status without calling upstream."""
    providers = [p.name for p in registry.providers]
    now = datetime.now(timezone.utc)

    if not providers:
        response.status_code = 503
        return HealthResponse(
            status="unhealthy",
            version=__version__,
            error="No availability providers configured",
            timestamp=now,
        )

    return HealthResponse(
        status="healthy",
        version=__version__,
        providers=providers,
        timestamp=now,
    )


@router.get(
    "/health/detailed",
    response_model=DetailedHealthResponse,
    responses={503: {"model": DetailedHealthResponse}},
    operation_id="getDetailedHealth",
    summary="Detailed health check",
    description=f"Probe the primary provider with {PROBE_DOMAIN} and report its rate limits.",
)
async def detailed_health_check(
    checker: Checker,
    registry: Providers,
    response: Response,
) -> DetailedHealthResponse:
    """Check API health with a live upstream call."""
    primary = checker.primary
    limiter = registry.rate_limiters.get(primary.name) if primary else None
    rate_limits = RateLimitResponse(**limiter.snapshot()) if limiter else None

    try:
        await checker.probe(PROBE_DOMAIN)
    except Exception as e:
        logger.warning(f"Health probe failed: {e}")
        response.status_code = 503
        return DetailedHealthResponse(
            status="unhealthy",
            provider=primary.name if primary else None,
            base_url=primary.base_url if primary else None,
            api_test="failed",
            error=str(e) or type(e).__name__,
            rate_limits=rate_limits,
            timestamp=datetime.now(timezone.utc),
        )

    return DetailedHealthResponse(
        status="healthy",
        provider=primary.name,
        base_url=primary.base_url,
        api_test="passed",
        rate_limits=rate_limits,
        timestamp=datetime.now(timezone.utc),
    )
