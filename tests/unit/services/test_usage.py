"""Tests for the Airtable usage sink."""

from __future__ import annotations

import json

import httpx
import pytest
from httpx import Response
from pydantic import ValidationError

from domaincheck.core.exceptions import UsageSinkError
from domaincheck.services.usage import AirtableUsageSink, UsageEvent

TABLE_URL = "https://api.airtable.com/v0/appBase123/Domain%20Generator%20Logs"


@pytest.fixture
def sink() -> AirtableUsageSink:
    """Create an Airtable sink for the default table."""
    return AirtableUsageSink("at-key", "appBase123")


@pytest.fixture
def event() -> UsageEvent:
    """Sample usage event."""
    return UsageEvent(
        company_name="Acme Corp",
        main_domain="acme.com",
        email="founder@acme.com",
        generated_count=25,
    )


class TestUsageEvent:
    """Tests for usage event validation."""

    def test_requires_positive_count(self):
        with pytest.raises(ValidationError):
            UsageEvent(company_name="Acme", main_domain="acme.com", email="a@acme.com", generated_count=0)

    def test_requires_non_empty_fields(self):
        with pytest.raises(ValidationError):
            UsageEvent(company_name="", main_domain="acme.com", email="a@acme.com", generated_count=1)


class TestAirtableUsageSink:
    """Tests for recording usage events."""

    def test_table_path_is_quoted(self, sink: AirtableUsageSink):
        assert sink.table_path == "/v0/appBase123/Domain%20Generator%20Logs"

    async def test_record_success(self, sink: AirtableUsageSink, event: UsageEvent, respx_mock):
        route = respx_mock.post(TABLE_URL).mock(
            return_value=Response(200, json={"id": "rec123", "fields": {}})
        )

        record = await sink.record(event)

        assert record.record_id == "rec123"
        request = route.calls.last.request
        assert request.headers["Authorization"] == "Bearer at-key"
        fields = json.loads(request.content)["fields"]
        assert fields["Company Name"] == "Acme Corp"
        assert fields["Main Domain"] == "acme.com"
        assert fields["Email"] == "founder@acme.com"
        assert fields["Generated Count"] == 25
        assert fields["Timestamp"] == record.timestamp.isoformat()
        await sink.close()

    @pytest.mark.parametrize(
        ("status", "message"),
        [
            (401, "Invalid Airtable API key"),
            (404, "Airtable base or table not found"),
            (422, "Invalid field configuration in Airtable"),
            (500, "Failed to log usage to Airtable"),
        ],
    )
    async def test_record_errors_keep_status(
        self,
        sink: AirtableUsageSink,
        event: UsageEvent,
        respx_mock,
        status,
        message,
    ):
        respx_mock.post(TABLE_URL).mock(return_value=Response(status, json={"error": "x"}))

        with pytest.raises(UsageSinkError) as exc_info:
            await sink.record(event)

        assert exc_info.value.status_code == status
        assert exc_info.value.message == message

    async def test_missing_record_id(self, sink: AirtableUsageSink, event: UsageEvent, respx_mock):
        respx_mock.post(TABLE_URL).mock(return_value=Response(200, json={}))

        with pytest.raises(UsageSinkError) as exc_info:
            await sink.record(event)

        assert exc_info.value.status_code == 502

    async def test_transport_error(self, sink: AirtableUsageSink, event: UsageEvent, respx_mock):
        respx_mock.post(TABLE_URL).mock(side_effect=httpx.ConnectError("unreachable"))

        with pytest.raises(UsageSinkError, match="Airtable request failed") as exc_info:
            await sink.record(event)

        assert exc_info.value.status_code == 500
