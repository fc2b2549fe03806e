from typing import Dict, List, Mapping, Optional, Sequence, TypeVar

from .types import MoodPreference, Wearable

T = TypeVar("T", bound=Wearable)

MOOD_PREFERENCES: Dict[str, MoodPreference] = {
    "happy": MoodPreference(
        mood="happy",
        preferred_categories=["dresses", "accessories"],
        preferred_colors=["yellow", "orange", "pink", "coral", "turquoise"],
    ),
    "confident": MoodPreference(
        mood="confident",
        preferred_categories=["outerwear", "shoes"],
        preferred_colors=["red", "black", "cobalt", "emerald"],
    ),
    "relaxed": MoodPreference(
        mood="relaxed",
        preferred_categories=["tops", "bottoms"],
        preferred_colors=["beige", "cream", "sage", "light blue", "grey"],
    ),
    "energetic": MoodPreference(
        mood="energetic",
        preferred_categories=["shoes", "tops"],
        preferred_colors=["red", "orange", "neon", "lime", "electric blue"],
    ),
    "romantic": MoodPreference(
        mood="romantic",
        preferred_categories=["dresses", "accessories"],
        preferred_colors=["pink", "blush", "lavender", "burgundy", "cream"],
    ),
    "professional": MoodPreference(
        mood="professional",
        preferred_categories=[],
        preferred_colors=["navy", "grey", "black", "white"],
    ),
    "creative": MoodPreference(
        mood="creative",
        preferred_categories=["accessories"],
        preferred_colors=["purple", "teal", "mustard", "multicolor", "print"],
    ),
}

MOOD_DESCRIPTIONS: Dict[str, str] = {
    "happy": "Bright, colorful outfits to match your upbeat mood",
    "confident": "Bold, striking choices to make a statement",
    "relaxed": "Comfortable, laid-back pieces for effortless style",
    "energetic": "Dynamic looks to keep up with your active day",
    "romantic": "Soft, feminine pieces for a dreamy aesthetic",
    "professional": "Polished, refined outfits for a commanding presence",
    "creative": "Unique, artistic combinations to express yourself",
}


def get_mood_preference(
    mood: Optional[str], mood_table: Optional[Mapping[str, MoodPreference]] = None
) -> Optional[MoodPreference]:
    if not mood:
        return None
    key = mood.strip().lower()
    if mood_table and key in mood_table:
        return mood_table[key]
    return MOOD_PREFERENCES.get(key)


def _color_matches(color: Optional[str], preferred: Sequence[str]) -> bool:
    c = (color or "").strip().lower()
    if not c:
        return False
    # "navy" matches "navy blue" and vice versa
    return any(p in c or c in p for p in (x.lower() for x in preferred) if p)


def matches_mood(item: Wearable, pref: MoodPreference) -> bool:
    if item.category in pref.preferred_categories:
        return True
    return _color_matches(item.color, pref.preferred_colors)


def apply_mood(
    pool: Sequence[T], mood: Optional[str], mood_table: Optional[Mapping[str, MoodPreference]] = None
) -> List[T]:
    """Move mood-matching items to the front, keeping relative order otherwise.

    This is an ordering, not a filter: every item of ``pool`` is returned.
    Unknown moods return the pool unchanged.
    """
    pref = get_mood_preference(mood, mood_table)
    if pref is None:
        return list(pool)
    matching = [it for it in pool if matches_mood(it, pref)]
    rest = [it for it in pool if not matches_mood(it, pref)]
    return matching + rest
