"""Usage-event sink backed by Airtable."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import ClassVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field

from domaincheck.core.exceptions import UsageSinkError

logger = logging.getLogger(__name__)


class UsageEvent(BaseModel):
    """One use of the domain generator."""

    model_config = ConfigDict(frozen=True)

    company_name: str = Field(..., min_length=1)
    main_domain: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    generated_count: int = Field(..., ge=1)


class UsageRecord(BaseModel):
    """Identifier of a stored usage event."""

    record_id: str
    timestamp: datetime


class AirtableUsageSink:
    """
    Records usage events as rows in an Airtable table.

    API Documentation: https://airtable.com/developers/web/api/create-records
    """

    BASE_URL: ClassVar[str] = "https://api.airtable.com"
    TIMEOUT: ClassVar[float] = 10.0

    _STATUS_MESSAGES: ClassVar[dict[int, str]] = {
        401: "Invalid Airtable API key",
        404: "Airtable base or table not found",
        422: "Invalid field configuration in Airtable",
    }

    def __init__(
        self,
        api_key: str,
        base_id: str,
        table_name: str = "Domain Generator Logs",
        *,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_id = base_id
        self._table_name = table_name
        self._base_url = base_url or self.BASE_URL
        self._client: httpx.AsyncClient | None = None

    @property
    def table_path(self) -> str:
        return f"/v0/{self._base_id}/{quote(self._table_name, safe='')}"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self.TIMEOUT),
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def record(self, event: UsageEvent) -> UsageRecord:
        """
        Store a usage event.

        Raises:
            UsageSinkError: Airtable rejected the record or was unreachable
        """
        timestamp = datetime.now(timezone.utc)
        payload = {
            "fields": {
                "Company Name": event.company_name,
                "Main Domain": event.main_domain,
                "Generated Count": event.generated_count,
                "Email": event.email,
                "Timestamp": timestamp.isoformat(),
            }
        }

        logger.info(
            f"Logging usage: {event.company_name} - {event.main_domain} - "
            f"{event.email} ({event.generated_count} domains)"
        )

        try:
            response = await self._get_client().post(self.table_path, json=payload)
        except httpx.HTTPError as e:
            raise UsageSinkError(f"Airtable request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Airtable API error: {response.status_code} {response.text[:200]}")
            raise UsageSinkError(
                self._STATUS_MESSAGES.get(response.status_code, "Failed to log usage to Airtable"),
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError:
            body = None
        record_id = body.get("id") if isinstance(body, dict) else None
        if not record_id:
            raise UsageSinkError("Airtable response did not include a record id", status_code=502)

        logger.info(f"Usage logged: record {record_id}")
        return UsageRecord(record_id=record_id, timestamp=timestamp)

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
