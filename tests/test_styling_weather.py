import pytest

from app.services.styling import WeatherCategory, WeatherObservation, classify, recommend
from app.services.styling.recommendations import DEFAULT_TIP, RECOMMENDATIONS


@pytest.mark.parametrize("temp", [-20, 0, 4.9])
def test_cold_below_threshold_without_keyword(temp):
    assert classify(WeatherObservation(temperature=temp, condition="overcast")) == WeatherCategory.COLD


@pytest.mark.parametrize("condition", ["Light rain", "RAIN", "Thunderstorm with rain", "freezing rain showers"])
@pytest.mark.parametrize("temp", [-5, 15, 35])
def test_rain_keyword_beats_temperature(condition, temp):
    assert classify(WeatherObservation(temperature=temp, condition=condition)) == WeatherCategory.RAINY


def test_keyword_order_first_match_wins():
    # contains both "snow" and "cloud"; snow is checked first
    assert classify(WeatherObservation(condition="Snow clouds")) == WeatherCategory.SNOWY
    assert classify(WeatherObservation(condition="Partly cloudy and windy")) == WeatherCategory.CLOUDY
    assert classify(WeatherObservation(condition="Windy")) == WeatherCategory.WINDY
    assert classify(WeatherObservation(condition="Mainly clear")) == WeatherCategory.SUNNY
    assert classify(WeatherObservation(temperature=30, condition="Sunny")) == WeatherCategory.SUNNY


def test_temperature_thresholds():
    assert classify(WeatherObservation(temperature=25, condition="Fog")) == WeatherCategory.MILD
    assert classify(WeatherObservation(temperature=25.1, condition="Fog")) == WeatherCategory.HOT
    assert classify(WeatherObservation(temperature=5)) == WeatherCategory.MILD


def test_missing_input_is_mild():
    assert classify(None) == WeatherCategory.MILD
    assert classify(WeatherObservation()) == WeatherCategory.MILD
    assert classify(WeatherObservation(condition="Fog")) == WeatherCategory.MILD


def test_recommend_is_pure_lookup():
    for category in WeatherCategory:
        first, second = recommend(category), recommend(category)
        assert first == second
        assert first.clothing_types == RECOMMENDATIONS[category].clothing_types
    assert recommend("sunny") == recommend(WeatherCategory.SUNNY)


def test_recommend_returns_copies():
    rec = recommend(WeatherCategory.HOT)
    rec.clothing_types.append("makeup")
    assert "makeup" not in recommend(WeatherCategory.HOT).clothing_types


def test_recommend_unknown_category():
    rec = recommend("tornado")
    assert rec.clothing_types == []
    assert rec.recommendation == DEFAULT_TIP
    assert recommend(None).recommendation == DEFAULT_TIP


def test_hot_and_sunny_cover_basic_slots():
    for category in (WeatherCategory.SUNNY, WeatherCategory.HOT):
        types = recommend(category).clothing_types
        assert {"tops", "bottoms", "shoes"} <= set(types)
    assert "outerwear" in recommend(WeatherCategory.COLD).clothing_types
