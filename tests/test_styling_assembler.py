import random

from app.services.styling import (
    SLOTS,
    WeatherCategory,
    WeatherObservation,
    assemble,
    candidate_pool,
    classify,
    expand_outfit_items,
    recommend,
)
from app.services.styling.types import MoodPreference

from fixtures import pieces


def _wardrobe():
    return pieces(
        ("t1", "tops", "white"),
        ("t2", "tops", "red"),
        ("t3", "tops", "navy"),
        ("b1", "bottoms", "dark blue"),
        ("b2", "bottoms", "khaki"),
        ("o1", "outerwear", "navy"),
        ("o2", "outerwear", "red"),
        ("s1", "shoes", "white"),
        ("a1", "accessories", "silver"),
        ("d1", "dresses", "pink"),
        ("m1", "makeup", "red"),
    )


def test_empty_wardrobe():
    assert assemble([], ["tops", "bottoms"]) == []
    assert assemble([], [], "happy", rng=random.Random(1)) == []


def test_hot_day_scenario_returns_all_three_in_slot_order():
    wardrobe = pieces(("shirt", "tops", "white"), ("jeans", "bottoms", "dark blue"), ("sneakers", "shoes", "white"))
    category = classify(WeatherObservation(temperature=30, condition="Sunny"))
    assert category == WeatherCategory.SUNNY
    out = assemble(wardrobe, recommend(category).clothing_types, rng=random.Random(7))
    assert [i.id for i in out] == ["shirt", "jeans", "sneakers"]


def test_sparse_filter_falls_back_to_full_wardrobe():
    wardrobe = pieces(("t1", "tops"), ("o1", "outerwear"))
    assert candidate_pool(wardrobe, ["tops"]) == wardrobe
    out = assemble(wardrobe, ["tops"], rng=random.Random(3))
    assert [i.id for i in out] == ["t1", "o1"]


def test_filter_applies_above_threshold():
    wardrobe = _wardrobe()
    pool = candidate_pool(wardrobe, ["tops", "bottoms"])
    assert {i.id for i in pool} == {"t1", "t2", "t3", "b1", "b2"}
    assert candidate_pool(wardrobe, ["tops", "bottoms"], min_pool=5) == wardrobe


def test_at_most_one_item_per_slot_and_only_wardrobe_members():
    wardrobe = _wardrobe()
    for seed in range(50):
        for mood in (None, "happy", "professional", "unknown-mood"):
            out = assemble(wardrobe, ["tops", "bottoms", "outerwear", "shoes", "accessories"], mood, rng=random.Random(seed))
            cats = [i.category for i in out]
            assert len(cats) == len(set(cats))
            assert all(i in wardrobe for i in out)
            assert cats == [s for s in SLOTS if s in cats]


def test_non_slot_categories_are_never_picked():
    out = assemble(_wardrobe(), ["dresses", "makeup", "tops", "bottoms"], rng=random.Random(0), min_pool=0)
    assert {i.category for i in out} <= {"tops", "bottoms"}


def test_seeded_rng_is_repeatable():
    wardrobe = _wardrobe()
    first = assemble(wardrobe, ["tops", "bottoms", "shoes"], "happy", rng=random.Random(42))
    second = assemble(wardrobe, ["tops", "bottoms", "shoes"], "happy", rng=random.Random(42))
    assert [i.id for i in first] == [i.id for i in second]


def test_mood_bias_one_always_picks_matching_candidate():
    wardrobe = _wardrobe()
    for seed in range(30):
        out = assemble(
            wardrobe, ["tops", "outerwear", "bottoms"], "professional", rng=random.Random(seed), min_pool=0, mood_bias=1.0
        )
        by_slot = {i.category: i.id for i in out}
        # navy and white tops/outerwear match the professional palette, red ones do not
        assert by_slot["tops"] in {"t1", "t3"}
        assert by_slot["outerwear"] == "o1"


def test_mood_bias_zero_still_reaches_every_candidate():
    wardrobe = _wardrobe()
    seen = set()
    for seed in range(200):
        out = assemble(wardrobe, ["outerwear"], "professional", rng=random.Random(seed), min_pool=0, mood_bias=0.0)
        seen.update(i.id for i in out if i.category == "outerwear")
    assert seen == {"o1", "o2"}


def test_user_mood_table_overrides_builtin():
    wardrobe = _wardrobe()
    table = {"professional": MoodPreference(mood="professional", preferred_colors=["red"])}
    for seed in range(20):
        out = assemble(
            wardrobe, ["outerwear"], "professional", rng=random.Random(seed), min_pool=0, mood_bias=1.0, mood_table=table
        )
        assert [i.id for i in out if i.category == "outerwear"] == ["o2"]


def test_expand_outfit_items_drops_missing_and_keeps_order():
    wardrobe = _wardrobe()
    out = expand_outfit_items(["s1", "gone", "t2", "b1", "also-gone"], wardrobe)
    assert [i.id for i in out] == ["s1", "t2", "b1"]
    assert expand_outfit_items([], wardrobe) == []
    assert expand_outfit_items(["x"], []) == []
