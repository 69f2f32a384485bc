"""Availability check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from domaincheck.api.dependencies import Checker
from domaincheck.api.schemas import (
    APIError,
    BatchCheckRequest,
    BatchCheckResponse,
    CheckResultResponse,
)
from domaincheck.core.exceptions import InvalidInputError

router = APIRouter(tags=["check"])


@router.get(
    "/check",
    response_model=CheckResultResponse,
    responses={400: {"model": APIError}},
    operation_id="checkDomain",
    summary="Check a single domain",
    description="Check one domain against the provider chain, falling back on failure.",
)
async def check_domain(
    checker: Checker,
    domain: str | None = Query(None, max_length=253, description="Domain to check"),
) -> CheckResultResponse:
    """Check availability of a single domain."""
    if not domain or not domain.strip():
        raise InvalidInputError(
            "Domain parameter is required",
            details={"example": "/check?domain=example.com"},
        )

    result = await checker.check(domain)
    return CheckResultResponse.model_validate(result)


@router.post(
    "/check-batch",
    response_model=BatchCheckResponse,
    responses={400: {"model": APIError}},
    operation_id="checkBatch",
    summary="Check a batch of domains",
    description="Check up to 100 domains, using a registrar batch call when available.",
)
async def check_batch(
    request: BatchCheckRequest,
    checker: Checker,
) -> BatchCheckResponse:
    """Check availability of a batch of domains, preserving input order."""
    report = await checker.check_batch(request.domains)
    return BatchCheckResponse.model_validate(report)
