import httpx
import pytest
import respx

from app.services.timezone import NearestTimeZoneService, TimezoneClient

API_URL = "https://tz.example.test/api/coordinate"


def _service(api_key: str | None = "") -> NearestTimeZoneService:
    client = TimezoneClient(api_url=API_URL, api_key=api_key)
    client.backoff = 0
    return NearestTimeZoneService(client)


@pytest.mark.asyncio
@respx.mock
async def test_resolve_returns_zone_name():
    route = respx.get(API_URL).respond(200, json={"timeZone": "Africa/Maputo"})
    service = _service()

    assert await service.resolve(25.95, 32.5833) == "Africa/Maputo"
    params = route.calls.last.request.url.params
    assert params["latitude"] == "25.95"
    assert params["longitude"] == "32.5833"
    assert "key" not in params


@pytest.mark.asyncio
@respx.mock
async def test_resolve_sends_api_key():
    route = respx.get(API_URL).respond(200, json={"timeZone": "Europe/Stockholm"})
    service = _service(api_key="secret")

    assert await service.resolve(59.33, 18.06) == "Europe/Stockholm"
    assert route.calls.last.request.url.params["key"] == "secret"


@pytest.mark.asyncio
@respx.mock
async def test_resolve_memoizes_coordinates():
    route = respx.get(API_URL).respond(200, json={"timeZone": "Asia/Tokyo"})
    service = _service()

    await service.resolve(35.68, 139.69)
    await service.resolve(35.68, 139.69)
    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_resolve_returns_none_on_client_error():
    route = respx.get(API_URL).respond(404)
    service = _service()

    assert await service.resolve(1.0, 2.0) is None
    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_resolve_retries_server_errors():
    route = respx.get(API_URL).respond(503)
    service = _service()

    assert await service.resolve(3.0, 4.0) is None
    assert route.call_count == 2


@pytest.mark.asyncio
@respx.mock
async def test_resolve_returns_none_without_zone():
    respx.get(API_URL).respond(200, json={"error": "out of range"})
    assert await _service().resolve(5.0, 6.0) is None


@pytest.mark.asyncio
@respx.mock
async def test_failed_lookup_is_not_remembered():
    route = respx.get(API_URL)
    route.side_effect = [
        httpx.Response(503),
        httpx.Response(503),
        httpx.Response(200, json={"timeZone": "Africa/Maputo"}),
    ]
    service = _service()

    assert await service.resolve(25.95, 32.5833) is None
    assert await service.resolve(25.95, 32.5833) == "Africa/Maputo"
    assert await service.resolve(25.95, 32.5833) == "Africa/Maputo"
    assert route.call_count == 3
