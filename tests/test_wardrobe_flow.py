import uuid

import httpx
import pytest

from app.core.db import SessionLocal
from app.models.models import WardrobeItem

from fixtures import API, OTHER_USER_ID, make_item


async def _foreign_item() -> str:
    async with SessionLocal() as session:
        item = WardrobeItem(id=uuid.uuid4(), user_id=OTHER_USER_ID, name="Plaid Skirt", category="bottoms")
        session.add(item)
        await session.commit()
        return str(item.id)


@pytest.mark.asyncio
async def test_item_crud(client: httpx.AsyncClient):
    item = await make_item(client, "White Oxford Shirt", "tops", color=" white ", tags=["Work Wear", "classic"])
    assert item["color"] == "white"
    assert item["tags"] == ["work-wear", "classic"]
    assert item["favorite"] is False

    got = await client.get(f"{API}/wardrobe/{item['id']}")
    assert got.status_code == 200
    assert got.json()["name"] == "White Oxford Shirt"

    patched = await client.patch(f"{API}/wardrobe/{item['id']}", json={"favorite": True, "brand": "Oxford & Co"})
    assert patched.status_code == 200
    assert patched.json()["favorite"] is True
    assert patched.json()["brand"] == "Oxford & Co"
    assert patched.json()["category"] == "tops"

    deleted = await client.delete(f"{API}/wardrobe/{item['id']}")
    assert deleted.status_code == 204
    missing = await client.get(f"{API}/wardrobe/{item['id']}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "item_not_found"


@pytest.mark.asyncio
async def test_list_filters(client: httpx.AsyncClient):
    await make_item(client, "Tee", "tops", tags=["casual"])
    await make_item(client, "Jeans", "bottoms", favorite=True, tags=["casual", "denim"])
    await make_item(client, "Loafers", "shoes")

    everything = await client.get(f"{API}/wardrobe")
    assert len(everything.json()) == 3

    tops = await client.get(f"{API}/wardrobe", params={"category": "tops"})
    assert [i["name"] for i in tops.json()] == ["Tee"]

    favs = await client.get(f"{API}/wardrobe", params={"favorite": "true"})
    assert [i["name"] for i in favs.json()] == ["Jeans"]

    denim = await client.get(f"{API}/wardrobe", params={"tag": "Denim"})
    assert [i["name"] for i in denim.json()] == ["Jeans"]


@pytest.mark.asyncio
async def test_validation(client: httpx.AsyncClient):
    resp = await client.post(f"{API}/wardrobe", json={"name": "Cape", "category": "capes"})
    assert resp.status_code == 422
    resp = await client.post(f"{API}/wardrobe", json={"name": "", "category": "tops"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_other_users_items_are_forbidden(client: httpx.AsyncClient):
    foreign = await _foreign_item()
    assert (await client.get(f"{API}/wardrobe/{foreign}")).status_code == 403
    assert (await client.patch(f"{API}/wardrobe/{foreign}", json={"name": "Mine now"})).status_code == 403
    assert (await client.delete(f"{API}/wardrobe/{foreign}")).status_code == 403
    listing = await client.get(f"{API}/wardrobe")
    assert listing.json() == []
