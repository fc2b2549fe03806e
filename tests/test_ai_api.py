import asyncio

import httpx
import openai
import pytest

from app.core.config import settings
from app.services import llm as llm_service
from app.services.llm.providers.openai import _clamp_score, _safe_parse_model, _safe_parse_outfits
from app.services.llm.types import (
    AIOutfitOut,
    OccasionOutfitOutput,
    RecommendOutfitsOutput,
    StyleAnalysisOutput,
)

from fixtures import API, make_item


class DummyProvider:
    def __init__(self):
        self.calls = []
        self.outfit_ids = []
        self.error = None

    def _record(self, kind, payload):
        self.calls.append(kind)
        if self.error is not None:
            raise self.error

    async def recommend_outfits(self, payload, *, timeout_ms):
        self._record("outfits", payload)
        return RecommendOutfitsOutput(
            outfits=[
                AIOutfitOut(name="Campus Classic", item_ids=self.outfit_ids + ["made-up-id"], confidence_score=88),
                AIOutfitOut(name="Imaginary", item_ids=["made-up-id"]),
            ]
        )

    async def occasion_outfit(self, payload, *, timeout_ms):
        self._record("occasion", payload)
        return OccasionOutfitOutput(name="Party Look", item_ids=self.outfit_ids, accessories=["clutch"])

    async def analyze_style(self, payload, *, timeout_ms):
        self._record("style", payload)
        return StyleAnalysisOutput(style_profile="Preppy classic", color_palette=["yellow", "white"])


@pytest.fixture
def provider(monkeypatch):
    dummy = DummyProvider()
    monkeypatch.setattr(settings, "LLM_ENABLED", True)
    monkeypatch.setattr(llm_service, "_provider", dummy)
    return dummy


@pytest.mark.asyncio
async def test_recommendations_keep_only_known_items(client: httpx.AsyncClient, provider):
    blazer = await make_item(client, "Yellow Blazer", "outerwear")
    skirt = await make_item(client, "Plaid Skirt", "bottoms")
    provider.outfit_ids = [blazer["id"], skirt["id"]]

    body = {"mood": "confident", "weather": "sunny"}
    resp = await client.post(f"{API}/ai-outfit-recommendations", json=body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 1
    rec = data["recommendations"][0]
    assert rec["name"] == "Campus Classic"
    assert [i["name"] for i in rec["items"]] == ["Yellow Blazer", "Plaid Skirt"]
    assert rec["confidence_score"] == 88

    # identical request is answered from the cache
    again = await client.post(f"{API}/ai-outfit-recommendations", json=body)
    assert again.json()["count"] == 1
    assert provider.calls == ["outfits"]


@pytest.mark.asyncio
async def test_recommendations_with_empty_wardrobe(client: httpx.AsyncClient, provider):
    resp = await client.post(f"{API}/ai-outfit-recommendations", json={"mood": "happy", "weather": "rainy"})
    assert resp.status_code == 200
    assert resp.json()["count"] == 0
    assert resp.json()["message"]
    assert provider.calls == []


@pytest.mark.asyncio
async def test_disabled_llm_returns_nothing(client: httpx.AsyncClient):
    await make_item(client, "Tee", "tops")
    resp = await client.post(f"{API}/ai-outfit-recommendations", json={"mood": "happy", "weather": "rainy"})
    assert resp.status_code == 200
    assert resp.json()["recommendations"] == []


@pytest.mark.asyncio
async def test_provider_errors(client: httpx.AsyncClient, provider):
    await make_item(client, "Tee", "tops")
    provider.error = asyncio.TimeoutError()
    resp = await client.post(f"{API}/ai-outfit-recommendations", json={"mood": "happy", "weather": "rainy"})
    assert resp.status_code == 504
    assert resp.json()["detail"] == "ai_timeout"

    provider.error = openai.OpenAIError("upstream down")
    resp = await client.post(f"{API}/ai-outfit-recommendations", json={"mood": "calm", "weather": "rainy"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "ai_unavailable"


@pytest.mark.asyncio
async def test_occasion_outfit(client: httpx.AsyncClient, provider):
    resp = await client.post(f"{API}/occasion-outfit", json={"occasion": "party"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "no_wardrobe_items"

    dress = await make_item(client, "Red Slip Dress", "dresses")
    resp = await client.post(f"{API}/occasion-outfit", json={"occasion": "party"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "no_suitable_outfit"

    provider.outfit_ids = [dress["id"]]
    resp = await client.post(
        f"{API}/occasion-outfit",
        json={"occasion": "birthday party", "weather": {"temperature": 20, "condition": "clear"}},
    )
    assert resp.status_code == 200
    rec = resp.json()["recommendation"]
    assert rec["name"] == "Party Look"
    assert [i["name"] for i in rec["items"]] == ["Red Slip Dress"]
    assert rec["accessories"] == ["clutch"]


@pytest.mark.asyncio
async def test_style_analysis_needs_three_items(client: httpx.AsyncClient, provider):
    await make_item(client, "Tee", "tops")
    await make_item(client, "Jeans", "bottoms")
    resp = await client.get(f"{API}/style-analysis")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "not_enough_items"

    profile = await client.get(f"{API}/style-profile")
    assert profile.status_code == 200
    assert profile.json()["analysis"]["profile_summary"] == "Style profile based on 2 wardrobe items"

    await make_item(client, "Loafers", "shoes")
    resp = await client.get(f"{API}/style-analysis")
    assert resp.status_code == 200
    assert resp.json()["item_count"] == 3
    assert resp.json()["analysis"]["style_profile"] == "Preppy classic"
    assert "usage" not in resp.json()["analysis"]


def test_parse_outfits_is_forgiving():
    raw = '{"outfits": [{"name": "A", "item_ids": ["1"], "confidence_score": "250"}, "junk", {"name": "B", "confidence_score": "high"}]}'
    outfits = _safe_parse_outfits(raw)
    assert [o.name for o in outfits] == ["A", "B"]
    assert outfits[0].confidence_score == 100
    assert outfits[1].confidence_score is None
    assert _safe_parse_outfits("not json") == []
    assert _safe_parse_outfits("[1, 2]") == []


def test_parse_model():
    out = _safe_parse_model('{"style_profile": "Minimal", "usage": {"model": "x"}}', StyleAnalysisOutput)
    assert out.style_profile == "Minimal"
    assert out.usage.model == ""
    assert _safe_parse_model('{"color_palette": "red"}', StyleAnalysisOutput) is None
    assert _clamp_score(0) == 1
    assert _clamp_score(None) is None


@pytest.mark.asyncio
async def test_sdk_timeout_maps_to_gateway_timeout(client: httpx.AsyncClient, provider):
    await make_item(client, "Tee", "tops")
    provider.error = openai.APITimeoutError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))
    resp = await client.post(f"{API}/ai-outfit-recommendations", json={"mood": "happy", "weather": "rainy"})
    assert resp.status_code == 504
    assert resp.json()["detail"] == "ai_timeout"
