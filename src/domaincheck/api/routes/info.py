"""Service info endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from domaincheck import __version__
from domaincheck.api.dependencies import Providers, Settings
from domaincheck.api.schemas import InfoResponse
from domaincheck.core.types import ProviderName

router = APIRouter(tags=["info"])

ENDPOINTS = {
    "GET /check": "Check single domain (add ?domain=example.com)",
    "POST /check-batch": "Check multiple domains (send {domains: [...]})",
    "POST /log-usage": "Log domain generator usage to Airtable",
    "GET /health": "Basic health check",
    "GET /health/detailed": "Detailed health check (tests API)",
}


@router.get(
    "/",
    response_model=InfoResponse,
    operation_id="getInfo",
    summary="Service info",
)
async def service_info(registry: Providers, settings: Settings) -> InfoResponse:
    providers = [p.name for p in registry.providers]

    environments: dict[str, str] = {}
    if ProviderName.NAMECOM in providers:
        environments[ProviderName.NAMECOM] = settings.namecom_environment.value
    if ProviderName.GODADDY in providers:
        environments[ProviderName.GODADDY] = settings.godaddy_environment.value

    return InfoResponse(
        name="Domain Checker API",
        version=__version__,
        providers=providers,
        environments=environments,
        status="configured" if providers else "missing credentials",
        endpoints=ENDPOINTS,
    )
