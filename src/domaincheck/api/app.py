"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from domaincheck import __version__
from domaincheck.api.dependencies import get_settings
from domaincheck.api.routes import check_router, health_router, info_router, usage_router
from domaincheck.api.schemas import APIError
from domaincheck.core.exceptions import InvalidInputError, UsageSinkError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize provider chain
    from domaincheck.providers.registry import ProviderRegistry
    from domaincheck.services.checking import CheckService

    logger.info("Initializing provider registry...")
    app.state.provider_registry = ProviderRegistry.from_settings(settings)
    if not app.state.provider_registry.providers:
        logger.warning("No availability providers configured")

    if settings.rdap_bootstrap_on_startup:
        logger.info("Loading RDAP bootstrap registry...")
        await app.state.provider_registry.load_rdap_bootstrap()

    app.state.check_service = CheckService(
        app.state.provider_registry,
        max_batch_size=settings.max_batch_size,
        batch_concurrency=settings.batch_concurrency,
    )

    # Initialize Airtable usage sink (optional)
    if settings.airtable_configured:
        from domaincheck.services.usage import AirtableUsageSink

        logger.info("Initializing Airtable usage sink...")
        app.state.usage_sink = AirtableUsageSink(
            settings.airtable_api_key,
            settings.airtable_base_id,
            settings.airtable_table_name,
        )
    else:
        logger.info("Airtable not configured, usage logging disabled")
        app.state.usage_sink = None

    logger.info("Application startup complete")

    yield

    # Cleanup
    logger.info("Shutting down application...")

    if hasattr(app.state, "usage_sink") and app.state.usage_sink:
        await app.state.usage_sink.close()

    if hasattr(app.state, "provider_registry"):
        await app.state.provider_registry.close_all()

    logger.info("Application shutdown complete")


def _error_response(status_code: int, error: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return _error_response(
        400,
        APIError(
            error=exc.message,
            provided=exc.details.get("provided"),
            example=exc.details.get("example"),
        ),
    )


async def usage_sink_error_handler(request: Request, exc: UsageSinkError) -> JSONResponse:
    logger.error(f"Usage logging failed: {exc.message}")
    return _error_response(
        exc.status_code,
        APIError(error="Failed to log usage", message=exc.message),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or "body"
        problems.append(f"{field}: {err.get('msg', 'invalid')}")
    return _error_response(
        400,
        APIError(error="Invalid request", message="; ".join(problems)),
    )


def create_app(
    *,
    title: str = "Domain Checker API",
    description: str = "Domain availability checks across registrars and RDAP",
    version: str = __version__,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
    )

    # Configure CORS
    if cors_origins is None:
        cors_origins = get_settings().cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Map domain errors onto {success: false, error} bodies
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(UsageSinkError, usage_sink_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register routes; paths are served from the root
    app.include_router(info_router)
    app.include_router(check_router)
    app.include_router(usage_router)
    app.include_router(health_router)

    return app


# For uvicorn direct execution
app = create_app()
