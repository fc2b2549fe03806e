from .types import MoodPreference, Recommendation, WeatherCategory, WeatherObservation
from .weather import classify
from .recommendations import RECOMMENDATIONS, recommend
from .mood import MOOD_DESCRIPTIONS, MOOD_PREFERENCES, apply_mood, get_mood_preference
from .assembler import MIN_FILTERED_POOL, SLOTS, assemble, candidate_pool, expand_outfit_items

__all__ = [
    "MoodPreference",
    "Recommendation",
    "WeatherCategory",
    "WeatherObservation",
    "classify",
    "RECOMMENDATIONS",
    "recommend",
    "MOOD_DESCRIPTIONS",
    "MOOD_PREFERENCES",
    "apply_mood",
    "get_mood_preference",
    "MIN_FILTERED_POOL",
    "SLOTS",
    "assemble",
    "candidate_pool",
    "expand_outfit_items",
]
