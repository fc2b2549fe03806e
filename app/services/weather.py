from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import httpx

from app.core.cache import cache_json_get, cache_json_set
from app.core.config import settings
from app.services.styling import Recommendation, WeatherCategory, WeatherObservation, classify, recommend

logger = logging.getLogger("uvicorn.error")


class WeatherLookupError(Exception):
    """The location could not be resolved."""


class WeatherUnavailableError(Exception):
    """The upstream weather service failed or returned garbage."""


# WMO weather interpretation codes, https://open-meteo.com/en/docs
WMO_CONDITIONS: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast clouds",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle rain",
    53: "Moderate drizzle rain",
    55: "Dense drizzle rain",
    56: "Light freezing drizzle rain",
    57: "Dense freezing drizzle rain",
    61: "Light rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Light snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Light rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Light snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm with rain",
    96: "Thunderstorm with light hail",
    99: "Thunderstorm with heavy hail",
}

KNOWN_LOCATIONS: List[str] = [
    "New York City",
    "Los Angeles",
    "Chicago",
    "Houston",
    "Phoenix",
    "Philadelphia",
    "San Antonio",
    "San Diego",
    "Dallas",
    "San Francisco",
    "Seattle",
    "Boston",
    "Miami",
    "Atlanta",
    "Denver",
    "Las Vegas",
    "Portland",
    "Austin",
    "Nashville",
    "New Orleans",
    "Toronto",
    "Vancouver",
    "Montreal",
    "Mexico City",
    "London",
    "Paris",
    "Milan",
    "Rome",
    "Madrid",
    "Barcelona",
    "Berlin",
    "Amsterdam",
    "Copenhagen",
    "Stockholm",
    "Dublin",
    "Lisbon",
    "Vienna",
    "Istanbul",
    "Dubai",
    "Mumbai",
    "New Delhi",
    "Singapore",
    "Hong Kong",
    "Seoul",
    "Tokyo",
    "Sydney",
    "Melbourne",
    "Auckland",
    "Sao Paulo",
    "Buenos Aires",
    "Cape Town",
    "Cairo",
]

MAX_SUGGESTIONS = 10


@dataclass
class WeatherReport:
    location: str
    observation: WeatherObservation
    category: WeatherCategory
    recommendation: Recommendation


def condition_for_code(code: Optional[int]) -> str:
    if code is None:
        return "Unknown"
    return WMO_CONDITIONS.get(int(code), "Unknown")


def suggest_locations(q: Optional[str]) -> List[str]:
    """Known locations containing ``q`` (case-insensitive); needs at least two characters."""
    query = (q or "").strip().lower()
    if len(query) < 2:
        return []
    return [loc for loc in KNOWN_LOCATIONS if query in loc.lower()][:MAX_SUGGESTIONS]


def build_report(location: str, observation: WeatherObservation) -> WeatherReport:
    category = classify(observation)
    return WeatherReport(location=location, observation=observation, category=category, recommendation=recommend(category))


class WeatherService:
    """Current conditions from Open-Meteo (geocoding, then forecast ``current=`` block)."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client

    async def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            if self._client is not None:
                resp = await self._client.get(url, params=params, timeout=settings.WEATHER_TIMEOUT_S)
            else:
                async with httpx.AsyncClient(timeout=settings.WEATHER_TIMEOUT_S) as client:
                    resp = await client.get(url, params=params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as e:
            logger.warning("weather: upstream error url=%s err=%s", url, e)
            raise WeatherUnavailableError(str(e)) from e
        except ValueError as e:
            logger.warning("weather: bad json url=%s", url)
            raise WeatherUnavailableError("invalid_json") from e

    async def geocode(self, location: str) -> Dict[str, Any]:
        data = await self._get_json(
            settings.WEATHER_GEOCODING_URL,
            {"name": location, "count": 1, "language": "en", "format": "json"},
        )
        results = data.get("results") or []
        if not results:
            raise WeatherLookupError(location)
        return results[0]

    async def observe(self, latitude: float, longitude: float) -> WeatherObservation:
        data = await self._get_json(
            settings.WEATHER_FORECAST_URL,
            {
                "latitude": latitude,
                "longitude": longitude,
                "current": "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code",
                "timezone": "auto",
            },
        )
        current = data.get("current")
        if not isinstance(current, dict):
            raise WeatherUnavailableError("missing_current")
        return WeatherObservation(
            temperature=current.get("temperature_2m"),
            condition=condition_for_code(current.get("weather_code")),
            humidity=current.get("relative_humidity_2m"),
            wind_speed=current.get("wind_speed_10m"),
        )

    async def current(self, location: Optional[str] = None) -> WeatherReport:
        location = (location or "").strip() or settings.WEATHER_DEFAULT_LOCATION
        if not settings.WEATHER_ENABLED:
            raise WeatherUnavailableError("disabled")
        cache_key = f"weather:current:{location.lower()}"
        cached = await cache_json_get(cache_key)
        if cached:
            return build_report(cached["location"], WeatherObservation(**cached["observation"]))

        place = await self.geocode(location)
        observation = await self.observe(place["latitude"], place["longitude"])
        label = place.get("name") or location
        logger.info(
            "weather: fetched location=%s temp=%s condition=%s", label, observation.temperature, observation.condition
        )
        await cache_json_set(
            cache_key, {"location": label, "observation": asdict(observation)}, settings.WEATHER_CACHE_TTL_S
        )
        return build_report(label, observation)


def get_weather_service() -> WeatherService:
    return WeatherService()
