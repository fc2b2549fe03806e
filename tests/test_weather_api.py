import httpx
import pytest

from app.core.config import settings
from app.services.weather import (
    WeatherService,
    WeatherUnavailableError,
    condition_for_code,
    suggest_locations,
)

from fixtures import API

PARIS = {"results": [{"name": "Paris", "latitude": 48.85, "longitude": 2.35}]}
RAINY_NOW = {"current": {"temperature_2m": 12.5, "relative_humidity_2m": 81, "wind_speed_10m": 9.4, "weather_code": 61}}


@pytest.fixture
def upstream(monkeypatch):
    calls = []
    responses = {settings.WEATHER_GEOCODING_URL: PARIS, settings.WEATHER_FORECAST_URL: RAINY_NOW}

    async def fake_get_json(self, url, params):
        calls.append(url)
        data = responses[url]
        if isinstance(data, Exception):
            raise data
        return data

    monkeypatch.setattr(WeatherService, "_get_json", fake_get_json)
    return responses, calls


@pytest.mark.asyncio
async def test_current_weather(client: httpx.AsyncClient, upstream):
    _, calls = upstream
    resp = await client.get(f"{API}/weather", params={"location": "paris"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["location"] == "Paris"
    assert body["condition"] == "Light rain"
    assert body["icon"] == "rainy"
    assert body["recommendations"]["condition"] == "rainy"
    assert body["recommendations"]["clothing_types"][0] == "outerwear"

    # second lookup is served from cache
    again = await client.get(f"{API}/weather", params={"location": "Paris"})
    assert again.json()["temperature"] == 12.5
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_default_location(client: httpx.AsyncClient, upstream, memory_cache):
    await client.get(f"{API}/weather")
    assert f"weather:current:{settings.WEATHER_DEFAULT_LOCATION.lower()}" in memory_cache


@pytest.mark.asyncio
async def test_unknown_location(client: httpx.AsyncClient, upstream):
    responses, _ = upstream
    responses[settings.WEATHER_GEOCODING_URL] = {"results": []}
    resp = await client.get(f"{API}/weather", params={"location": "Atlantis"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "unknown_location"


@pytest.mark.asyncio
async def test_upstream_failure(client: httpx.AsyncClient, upstream):
    responses, _ = upstream
    responses[settings.WEATHER_FORECAST_URL] = WeatherUnavailableError("boom")
    resp = await client.get(f"{API}/weather", params={"location": "Paris"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "weather_unavailable"


@pytest.mark.asyncio
async def test_weather_disabled(client: httpx.AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "WEATHER_ENABLED", False)
    resp = await client.get(f"{API}/weather", params={"location": "Paris"})
    assert resp.status_code == 502


@pytest.mark.asyncio
async def test_http_errors_become_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"reason": "maintenance"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        service = WeatherService(client=http)
        with pytest.raises(WeatherUnavailableError):
            await service.geocode("Paris")


@pytest.mark.asyncio
async def test_missing_current_block():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"hourly": {}})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(WeatherUnavailableError):
            await WeatherService(client=http).observe(1.0, 2.0)


def test_condition_codes():
    assert condition_for_code(0) == "Clear sky"
    assert condition_for_code(3) == "Overcast clouds"
    assert condition_for_code(1234) == "Unknown"
    assert condition_for_code(None) == "Unknown"


@pytest.mark.asyncio
async def test_suggestions(client: httpx.AsyncClient):
    resp = await client.get(f"{API}/weather-suggestions", params={"q": "san"})
    assert resp.json() == ["San Antonio", "San Diego", "San Francisco"]
    assert suggest_locations("a") == []
    assert suggest_locations(None) == []
    assert len(suggest_locations("an")) <= 10
