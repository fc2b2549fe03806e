from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.schemas.weather import WeatherOut, WeatherRecommendationOut
from app.services.weather import (
    WeatherLookupError,
    WeatherReport,
    WeatherService,
    WeatherUnavailableError,
    get_weather_service,
    suggest_locations,
)

router = APIRouter(tags=["weather"])


def _weather_out(report: WeatherReport) -> WeatherOut:
    obs = report.observation
    return WeatherOut(
        location=report.location,
        temperature=obs.temperature,
        condition=obs.condition or "Unknown",
        humidity=obs.humidity,
        wind_speed=obs.wind_speed,
        icon=report.category.value,
        recommendations=WeatherRecommendationOut(
            condition=report.category.value,
            recommendation=report.recommendation.recommendation,
            clothing_types=report.recommendation.clothing_types,
        ),
    )


async def fetch_report(service: WeatherService, location: Optional[str]) -> WeatherReport:
    try:
        return await service.current(location)
    except WeatherLookupError:
        raise HTTPException(status_code=400, detail="unknown_location")
    except WeatherUnavailableError:
        raise HTTPException(status_code=502, detail="weather_unavailable")


@router.get("/weather", response_model=WeatherOut)
async def current_weather(
    location: Optional[str] = Query(None),
    service: WeatherService = Depends(get_weather_service),
):
    return _weather_out(await fetch_report(service, location))


@router.get("/weather-suggestions", response_model=List[str])
async def weather_suggestions(q: Optional[str] = Query(None)):
    return suggest_locations(q)
