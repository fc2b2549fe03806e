import pytest

from app.core.tags import MAX_TAGS, normalize_many, normalize_tag

from fixtures import API, make_item


def test_slugify():
    assert normalize_tag(" Date Night! ") == "date-night"
    assert normalize_tag("Boho/Chic") == "boho-chic"
    assert normalize_tag("Après Ski") == "apres-ski"


def test_length_bounds():
    with pytest.raises(ValueError):
        normalize_tag("a" * 33)
    with pytest.raises(ValueError):
        normalize_tag("!!!")
    assert normalize_tag("a" * 32) == "a" * 32


def test_normalize_many_dedupes_and_caps():
    assert normalize_many(["Preppy", "preppy", " PREPPY "]) == ["preppy"]
    assert len(normalize_many([f"tag{i}" for i in range(30)])) == MAX_TAGS
    assert normalize_many(None) == []


@pytest.mark.asyncio
async def test_bad_tag_is_rejected(client):
    resp = await client.post(f"{API}/wardrobe", json={"name": "Beret", "category": "accessories", "tags": ["???"]})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "invalid_tag"

    beret = await make_item(client, "Beret", "accessories", tags=["French Girl"])
    patched = await client.patch(f"{API}/wardrobe/{beret['id']}", json={"tags": ["Paris", "paris"]})
    assert patched.json()["tags"] == ["paris"]
