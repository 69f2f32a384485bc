"""Usage logging endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from domaincheck.api.dependencies import UsageSink
from domaincheck.api.schemas import APIError, UsageRequest, UsageResponse
from domaincheck.core.exceptions import UsageSinkError
from domaincheck.services.usage import UsageEvent

router = APIRouter(tags=["usage"])


@router.post(
    "/log-usage",
    response_model=UsageResponse,
    responses={400: {"model": APIError}, 500: {"model": APIError}},
    operation_id="logUsage",
    summary="Log generator usage",
    description="Record one use of the domain generator in Airtable.",
)
async def log_usage(request: UsageRequest, sink: UsageSink) -> UsageResponse:
    if sink is None:
        raise UsageSinkError("Airtable credentials not configured on server", status_code=500)

    record = await sink.record(
        UsageEvent(
            company_name=request.company_name,
            main_domain=request.main_domain,
            email=request.email,
            generated_count=request.generated_count,
        )
    )
    return UsageResponse(record_id=record.record_id, timestamp=record.timestamp)
