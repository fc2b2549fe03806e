import random
from typing import Iterable, List, Mapping, Optional, Sequence, TypeVar

from .mood import apply_mood, get_mood_preference, matches_mood
from .types import MoodPreference, Wearable

T = TypeVar("T", bound=Wearable)

SLOTS = ["tops", "bottoms", "outerwear", "shoes", "accessories"]

# A weather filter leaving this many items or fewer is discarded in favour of the whole wardrobe.
MIN_FILTERED_POOL = 3
DEFAULT_MOOD_BIAS = 0.75


def candidate_pool(wardrobe: Sequence[T], preferred_categories: Iterable[str], min_pool: int = MIN_FILTERED_POOL) -> List[T]:
    preferred = set(preferred_categories or [])
    filtered = [it for it in wardrobe if it.category in preferred]
    if len(filtered) <= min_pool:
        return list(wardrobe)
    return filtered


def _pick(
    candidates: List[T],
    pref: Optional[MoodPreference],
    rng: random.Random,
    mood_bias: float,
) -> T:
    if pref is not None:
        prefix = 0
        while prefix < len(candidates) and matches_mood(candidates[prefix], pref):
            prefix += 1
        if 0 < prefix and rng.random() < mood_bias:
            return rng.choice(candidates[:prefix])
    return rng.choice(candidates)


def assemble(
    wardrobe: Sequence[T],
    preferred_categories: Iterable[str],
    mood: Optional[str] = None,
    *,
    rng: Optional[random.Random] = None,
    min_pool: int = MIN_FILTERED_POOL,
    mood_bias: float = DEFAULT_MOOD_BIAS,
    mood_table: Optional[Mapping[str, MoodPreference]] = None,
) -> List[T]:
    """Build a candidate outfit with at most one item per slot.

    Items are drawn from the weather-filtered wardrobe (or the full wardrobe
    when the filter is too sparse). Picks follow ``SLOTS`` order and empty
    slots are left out. Pass a seeded ``rng`` for repeatable results.
    """
    if not wardrobe:
        return []
    rng = rng or random.Random()
    pool = candidate_pool(wardrobe, preferred_categories, min_pool)
    pref = get_mood_preference(mood, mood_table)

    picks: List[T] = []
    for slot in SLOTS:
        candidates = [it for it in pool if it.category == slot]
        if not candidates:
            continue
        if pref is not None:
            candidates = apply_mood(candidates, mood, mood_table)
        picks.append(_pick(candidates, pref, rng, mood_bias))
    return picks


def expand_outfit_items(item_ids: Iterable[object], items: Iterable[T]) -> List[T]:
    """Resolve outfit item ids to records, dropping ids that no longer exist."""
    by_id = {str(it.id): it for it in items}
    out: List[T] = []
    for item_id in item_ids or []:
        item = by_id.get(str(item_id))
        if item is not None:
            out.append(item)
    return out
