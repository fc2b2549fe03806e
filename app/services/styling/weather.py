from typing import Optional

from .types import WeatherCategory, WeatherObservation

COLD_BELOW_C = 5
HOT_ABOVE_C = 25

# first match wins
CONDITION_KEYWORDS: list[tuple[tuple[str, ...], WeatherCategory]] = [
    (("rain",), WeatherCategory.RAINY),
    (("snow",), WeatherCategory.SNOWY),
    (("cloud",), WeatherCategory.CLOUDY),
    (("wind",), WeatherCategory.WINDY),
    (("sun", "clear"), WeatherCategory.SUNNY),
]


def classify(observation: Optional[WeatherObservation]) -> WeatherCategory:
    """Map a weather reading to a single category.

    Condition keywords take precedence over temperature thresholds. Missing
    input degrades to ``mild``.
    """
    if observation is None:
        return WeatherCategory.MILD
    condition = (observation.condition or "").lower()
    for keywords, category in CONDITION_KEYWORDS:
        if any(k in condition for k in keywords):
            return category
    temp = observation.temperature
    if temp is None:
        return WeatherCategory.MILD
    if temp < COLD_BELOW_C:
        return WeatherCategory.COLD
    if temp > HOT_ABOVE_C:
        return WeatherCategory.HOT
    return WeatherCategory.MILD
