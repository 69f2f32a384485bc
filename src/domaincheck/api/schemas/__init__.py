"""API schema definitions."""

from domaincheck.api.schemas.base import APIBaseSchema, APIError
from domaincheck.api.schemas.requests import BatchCheckRequest, UsageRequest
from domaincheck.api.schemas.responses import (
    BatchCheckResponse,
    CheckResultResponse,
    DetailedHealthResponse,
    HealthResponse,
    InfoResponse,
    RateLimitResponse,
    UsageResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    # Requests
    "BatchCheckRequest",
    "UsageRequest",
    # Responses
    "BatchCheckResponse",
    "CheckResultResponse",
    "DetailedHealthResponse",
    "HealthResponse",
    "InfoResponse",
    "RateLimitResponse",
    "UsageResponse",
]
