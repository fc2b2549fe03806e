from __future__ import annotations

import json
from typing import Any, Dict, List

from app.services.llm.types import (
    OccasionOutfitInput,
    RecommendOutfitsInput,
    StyleAnalysisInput,
    WardrobeItemBrief,
)


PROMPT_VERSION = "p1"

RECOMMEND_SYS = (
    "You are a personal styling assistant who builds outfits only from the user's own wardrobe. "
    "Always respond in valid JSON."
)

OCCASION_SYS = (
    "You are a styling assistant specializing in occasion dressing. "
    "Use only items from the provided wardrobe. Always respond in valid JSON."
)

STYLE_SYS = (
    "You are a professional fashion stylist analyzing a wardrobe. Always respond in valid JSON."
)

RECOMMEND_FORMAT = (
    "Create 3 outfits. Return ONLY JSON: {\"outfits\": [{\"name\": \"...\", \"item_ids\": [\"...\"], "
    "\"styling_tip\": \"...\", \"reasoning\": \"...\", \"confidence_score\": 1-100}]}. "
    "item_ids must be ids from the wardrobe list."
)

OCCASION_FORMAT = (
    "Return ONLY JSON: {\"name\": \"...\", \"item_ids\": [\"...\"], \"accessories\": [\"...\"], "
    "\"styling_instructions\": \"...\", \"occasion_reasoning\": \"...\"}. "
    "item_ids must be ids from the wardrobe list."
)

STYLE_FORMAT = (
    "Return ONLY JSON: {\"style_profile\": \"...\", \"color_palette\": [\"...\"], \"patterns\": [\"...\"], "
    "\"strengths\": [\"...\"], \"development_areas\": [\"...\"], \"recommendations\": [\"...\"]}."
)


def _item_line(item: WardrobeItemBrief) -> str:
    line = f"[{item.id}] {item.name} ({item.category})"
    if item.color:
        line += f": {item.color}"
    if item.description:
        line += f", {item.description}"
    if item.tags:
        line += f" #{' #'.join(item.tags)}"
    return line


def _wardrobe_block(items: List[WardrobeItemBrief]) -> str:
    return "Wardrobe items:\n" + "\n".join(_item_line(i) for i in items)


def build_recommend_prompt(payload: RecommendOutfitsInput) -> List[Dict[str, Any]]:
    parts = [_wardrobe_block(payload.items)]
    if payload.weather:
        parts.append(f"Weather: {payload.weather}")
    if payload.occasion:
        parts.append(f"Occasion: {payload.occasion}")
    if payload.mood:
        parts.append(f"Current mood: {payload.mood}")
    if payload.preferences:
        parts.append(f"Style preferences: {json.dumps(payload.preferences, sort_keys=True)}")
    parts.append(RECOMMEND_FORMAT)
    return [
        {"role": "system", "content": RECOMMEND_SYS},
        {"role": "user", "content": "\n\n".join(parts)},
    ]


def build_occasion_prompt(payload: OccasionOutfitInput) -> List[Dict[str, Any]]:
    parts = [f"Occasion: {payload.occasion}", _wardrobe_block(payload.items)]
    if payload.weather:
        parts.append(
            "Weather: "
            f"{payload.weather.get('temperature', 'unknown')}°C, {payload.weather.get('condition') or 'unknown'}"
        )
    if payload.preferences:
        parts.append(f"Style preferences: {json.dumps(payload.preferences, sort_keys=True)}")
    parts.append(OCCASION_FORMAT)
    return [
        {"role": "system", "content": OCCASION_SYS},
        {"role": "user", "content": "\n\n".join(parts)},
    ]


def build_style_prompt(payload: StyleAnalysisInput) -> List[Dict[str, Any]]:
    return [
        {"role": "system", "content": STYLE_SYS},
        {
            "role": "user",
            "content": "Describe this user's style profile.\n\n" + _wardrobe_block(payload.items) + "\n\n" + STYLE_FORMAT,
        },
    ]
