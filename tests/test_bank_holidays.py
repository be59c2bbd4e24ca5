from datetime import date

import httpx
import pytest
from tenacity import wait_none

from helix_hub.dates import BankHolidayClient
from helix_hub.exceptions import ExternalServiceError

FEED = {
    "england-and-wales": {
        "division": "england-and-wales",
        "events": [
            {"title": "Christmas Day", "date": "2024-12-25"},
            {"title": "New Year's Day", "date": "2024-01-01"},
            {"title": "New Year's Day", "date": "2025-01-01"},
            {"title": "Boxing Day", "date": "2024-12-26"},
        ],
    },
    "scotland": {
        "division": "scotland",
        "events": [{"title": "St Andrew's Day", "date": "2024-12-02"}],
    },
}


def make_client(handler):
    return BankHolidayClient(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


@pytest.fixture
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(BankHolidayClient._fetch_feed.retry, "wait", wait_none())


async def test_returns_sorted_dates_for_year():
    client = make_client(lambda request: httpx.Response(200, json=FEED))

    holidays = await client.get_bank_holidays(2024)

    assert holidays == [date(2024, 1, 1), date(2024, 12, 25), date(2024, 12, 26)]


async def test_uses_configured_division(monkeypatch, settings):
    monkeypatch.setattr(settings, "bank_holidays_division", "scotland")
    client = make_client(lambda request: httpx.Response(200, json=FEED))

    assert await client.get_bank_holidays(2024) == [date(2024, 12, 2)]


async def test_years_are_cached():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=FEED)

    client = make_client(handler)
    await client.get_bank_holidays(2024)
    await client.get_bank_holidays(2024)

    assert len(requests) == 1


async def test_http_failure_raises_external_service_error(no_retry_wait):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(503)

    client = make_client(handler)

    with pytest.raises(ExternalServiceError):
        await client.get_bank_holidays(2024)
    assert len(requests) == 3


async def test_unexpected_payload_raises_external_service_error():
    client = make_client(lambda request: httpx.Response(200, json={"wales": {}}))

    with pytest.raises(ExternalServiceError):
        await client.get_bank_holidays(2024)


async def test_close():
    client = make_client(lambda request: httpx.Response(200, json=FEED))
    await client.get_bank_holidays(2024)

    await client.close()

    assert client._http_client.is_closed


async def test_division_that_is_not_an_object_raises_external_service_error():
    client = make_client(
        lambda request: httpx.Response(200, json={"england-and-wales": ["2024-12-25"]})
    )

    with pytest.raises(ExternalServiceError, match="Unexpected bank holidays payload"):
        await client.get_bank_holidays(2024)
