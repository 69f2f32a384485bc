"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field

from domaincheck.api.schemas.base import APIBaseSchema


class BatchCheckRequest(APIBaseSchema):
    """Request to check a batch of domains."""

    # Shape and bounds are enforced by the dispatcher so the
    # error messages match the library's.
    domains: Annotated[
        Any,
        Field(
            default=None,
            description="Domain names to check, at most 100.",
            examples=[["example.com", "example.net"]],
        ),
    ]


class UsageRequest(APIBaseSchema):
    """Request to record one use of the domain generator."""

    company_name: Annotated[
        str,
        Field(min_length=1, max_length=200, description="Company the domains were generated for."),
    ]

    main_domain: Annotated[
        str,
        Field(min_length=1, max_length=253, description="The company's main domain."),
    ]

    email: Annotated[
        str,
        Field(min_length=1, max_length=320, description="Contact email of the user."),
    ]

    generated_count: Annotated[
        int,
        Field(ge=1, description="Number of domains generated."),
    ]
