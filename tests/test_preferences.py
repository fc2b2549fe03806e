import httpx
import pytest

from app.services.preferences import apply_weather_preference
from app.models.models import WeatherPreference

from fixtures import API


@pytest.mark.asyncio
async def test_weather_preferences(client: httpx.AsyncClient):
    resp = await client.post(
        f"{API}/weather-preferences",
        json={"weather_type": "rainy", "preferred_categories": ["outerwear", "shoes"], "avoid_categories": ["dresses"]},
    )
    assert resp.status_code == 201
    listing = await client.get(f"{API}/weather-preferences")
    assert [p["weather_type"] for p in listing.json()] == ["rainy"]

    bad = await client.post(f"{API}/weather-preferences", json={"weather_type": "foggy"})
    assert bad.status_code == 422
    bad = await client.post(f"{API}/weather-preferences", json={"weather_type": "hot", "avoid_categories": ["capes"]})
    assert bad.status_code == 422


@pytest.mark.asyncio
async def test_mood_preferences(client: httpx.AsyncClient):
    resp = await client.post(f"{API}/mood-preferences", json={"mood": " Relaxed ", "preferred_colors": ["sage"]})
    assert resp.status_code == 201
    assert resp.json()["mood"] == "relaxed"
    assert resp.json()["description"]
    listing = await client.get(f"{API}/mood-preferences")
    assert listing.json()[0]["preferred_colors"] == ["sage"]


@pytest.mark.asyncio
async def test_builtin_moods(client: httpx.AsyncClient):
    moods = (await client.get(f"{API}/moods")).json()
    assert {m["mood"] for m in moods} == {"happy", "confident", "relaxed", "energetic", "romantic", "professional", "creative"}
    assert all(m["description"] for m in moods)


def test_apply_weather_preference():
    defaults = ["outerwear", "tops", "bottoms", "shoes"]
    assert apply_weather_preference(defaults, None) == defaults
    avoid = WeatherPreference(weather_type="rainy", preferred_categories=[], avoid_categories=["shoes"])
    assert apply_weather_preference(defaults, avoid) == ["outerwear", "tops", "bottoms"]
    replace = WeatherPreference(weather_type="rainy", preferred_categories=["outerwear", "accessories"], avoid_categories=["accessories"])
    assert apply_weather_preference(defaults, replace) == ["outerwear"]


@pytest.mark.asyncio
async def test_health(client: httpx.AsyncClient):
    resp = await client.get(f"{API}/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["environment"]
