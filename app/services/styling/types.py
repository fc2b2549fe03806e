from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence


class WeatherCategory(str, Enum):
    """Coarse weather classes used to pick clothing categories."""
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    WINDY = "windy"
    COLD = "cold"
    HOT = "hot"
    MILD = "mild"


@dataclass
class WeatherObservation:
    """A single weather reading as returned by the weather provider."""
    temperature: Optional[float] = None  # celsius
    condition: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None


@dataclass
class Recommendation:
    """Preferred clothing categories and a styling tip for a weather category."""
    clothing_types: List[str] = field(default_factory=list)
    recommendation: str = ""


@dataclass
class MoodPreference:
    mood: str
    preferred_categories: List[str] = field(default_factory=list)
    preferred_colors: List[str] = field(default_factory=list)


class Wearable(Protocol):
    """Anything with the attributes the assembler reads (ORM rows or plain records)."""
    id: object
    category: str
    color: Optional[str]
    tags: Optional[Sequence[str]]
