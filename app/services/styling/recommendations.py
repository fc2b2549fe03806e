from typing import Dict, Union

from .types import Recommendation, WeatherCategory

DEFAULT_TIP = "Dress in comfortable layers you can adjust as the day goes on."

RECOMMENDATIONS: Dict[WeatherCategory, Recommendation] = {
    WeatherCategory.SUNNY: Recommendation(
        clothing_types=["tops", "bottoms", "dresses", "shoes", "accessories"],
        recommendation="Light, breathable fabrics and sunglasses. Finish with a sun hat if you'll be outdoors.",
    ),
    WeatherCategory.CLOUDY: Recommendation(
        clothing_types=["tops", "bottoms", "outerwear", "shoes"],
        recommendation="Layer a light jacket or cardigan over your look in case the sun stays hidden.",
    ),
    WeatherCategory.RAINY: Recommendation(
        clothing_types=["outerwear", "tops", "bottoms", "shoes"],
        recommendation="A waterproof jacket and water-resistant shoes will keep you dry. Skip suede today.",
    ),
    WeatherCategory.SNOWY: Recommendation(
        clothing_types=["outerwear", "tops", "bottoms", "shoes", "accessories"],
        recommendation="Insulated outerwear, warm boots and a scarf. Thermal layers underneath help.",
    ),
    WeatherCategory.WINDY: Recommendation(
        clothing_types=["outerwear", "tops", "bottoms", "shoes"],
        recommendation="A windbreaker and fitted pieces. Avoid flowing skirts and loose hats.",
    ),
    WeatherCategory.COLD: Recommendation(
        clothing_types=["outerwear", "tops", "bottoms", "shoes", "accessories"],
        recommendation="Bundle up with a warm coat, knitwear and closed shoes. Add gloves and a scarf.",
    ),
    WeatherCategory.HOT: Recommendation(
        clothing_types=["tops", "bottoms", "dresses", "shoes", "accessories"],
        recommendation="Stay cool in breathable cotton or linen, shorts or a light dress, and sandals.",
    ),
    WeatherCategory.MILD: Recommendation(
        clothing_types=["tops", "bottoms", "dresses", "outerwear", "shoes"],
        recommendation="Lightweight layers are ideal. Bring a light jacket for the evening.",
    ),
}


def recommend(category: Union[WeatherCategory, str, None]) -> Recommendation:
    """Look up the clothing categories and tip for a weather category.

    Unknown categories get an empty list and a neutral tip.
    """
    try:
        key = WeatherCategory(category)
    except ValueError:
        return Recommendation(clothing_types=[], recommendation=DEFAULT_TIP)
    rec = RECOMMENDATIONS[key]
    return Recommendation(clothing_types=list(rec.clothing_types), recommendation=rec.recommendation)
