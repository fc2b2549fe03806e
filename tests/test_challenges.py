import httpx
import pytest

from app.main import app
from app.auth import deps as auth_deps
from app.services.challenges import level_for

from fixtures import API, OTHER_USER_ID, TEST_USER_ID


async def _challenge(client: httpx.AsyncClient, title: str = "Thirty Wears", **extra) -> dict:
    resp = await client.post(f"{API}/challenges", json={"title": title, "points": 120, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_challenge_catalogue(client: httpx.AsyncClient):
    live = await _challenge(client, category="sustainable", duration_days=30)
    retired = await _challenge(client, "Winter Whites", active=False)

    everything = await client.get(f"{API}/challenges")
    assert {c["id"] for c in everything.json()} == {live["id"], retired["id"]}
    active = await client.get(f"{API}/challenges", params={"active": "true"})
    assert [c["id"] for c in active.json()] == [live["id"]]

    patched = await client.patch(f"{API}/challenges/{retired['id']}", json={"active": True, "difficulty": "hard"})
    assert patched.json()["active"] is True
    assert patched.json()["difficulty"] == "hard"
    assert patched.json()["title"] == "Winter Whites"

    missing = await client.get(f"{API}/challenges/00000000-0000-0000-0000-000000000000")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "challenge_not_found"

    bad = await client.post(f"{API}/challenges", json={"title": "Impossible", "difficulty": "legendary"})
    assert bad.status_code == 422


@pytest.mark.asyncio
async def test_accept_progress_complete(client: httpx.AsyncClient):
    challenge = await _challenge(client)
    accepted = await client.post(f"{API}/user-challenges", json={"challenge_id": challenge["id"]})
    assert accepted.status_code == 201
    uc = accepted.json()
    assert uc["progress"] == 0
    assert uc["challenge"]["title"] == "Thirty Wears"

    again = await client.post(f"{API}/user-challenges", json={"challenge_id": challenge["id"]})
    assert again.status_code == 409
    assert again.json()["detail"] == "challenge_already_accepted"

    ghost = await client.post(f"{API}/user-challenges", json={"challenge_id": "not-an-id"})
    assert ghost.status_code == 404

    progressed = await client.patch(f"{API}/user-challenges/{uc['id']}", json={"progress": 250})
    assert progressed.json()["progress"] == 100
    assert progressed.json()["completed"] is False

    done = await client.post(f"{API}/user-challenges/{uc['id']}/complete")
    assert done.status_code == 200
    assert done.json()["completed"] is True
    assert done.json()["completed_at"]

    # completing twice credits points once
    await client.post(f"{API}/user-challenges/{uc['id']}/complete")
    stats = (await client.get(f"{API}/user-stats")).json()
    assert stats == {"points": 120, "level": 2, "challenges_completed": 1, "achievements_unlocked": 0}

    locked = await client.patch(f"{API}/user-challenges/{uc['id']}", json={"progress": 10})
    assert locked.status_code == 409

    mine = await client.get(f"{API}/user-challenges")
    assert [c["id"] for c in mine.json()] == [uc["id"]]


@pytest.mark.asyncio
async def test_user_challenges_are_private(client: httpx.AsyncClient):
    challenge = await _challenge(client)
    uc = (await client.post(f"{API}/user-challenges", json={"challenge_id": challenge["id"]})).json()

    app.dependency_overrides[auth_deps.get_current_user_id] = lambda: OTHER_USER_ID
    assert (await client.post(f"{API}/user-challenges/{uc['id']}/complete")).status_code == 403
    assert (await client.patch(f"{API}/user-challenges/{uc['id']}", json={"progress": 5})).status_code == 403
    assert (await client.get(f"{API}/user-challenges")).json() == []
    app.dependency_overrides[auth_deps.get_current_user_id] = lambda: TEST_USER_ID


@pytest.mark.asyncio
async def test_achievements_and_stats(client: httpx.AsyncClient):
    fresh = await client.get(f"{API}/user-stats")
    assert fresh.json() == {"points": 0, "level": 1, "challenges_completed": 0, "achievements_unlocked": 0}

    resp = await client.post(f"{API}/achievements", json={"name": "First Outfit", "icon": "sparkles"})
    assert resp.status_code == 201
    assert resp.json()["points_awarded"] == 50

    dup = await client.post(f"{API}/achievements", json={"name": "First Outfit"})
    assert dup.status_code == 409
    assert dup.json()["detail"] == "achievement_exists"

    await client.post(f"{API}/achievements", json={"name": "Closet Curator", "points_awarded": 75})
    names = {a["name"] for a in (await client.get(f"{API}/achievements")).json()}
    assert names == {"First Outfit", "Closet Curator"}

    stats = (await client.get(f"{API}/user-stats")).json()
    assert stats["points"] == 125
    assert stats["level"] == 2
    assert stats["achievements_unlocked"] == 2


@pytest.mark.asyncio
async def test_challenges_need_auth_to_join(client: httpx.AsyncClient):
    app.dependency_overrides.pop(auth_deps.get_current_user_id, None)
    assert (await client.get(f"{API}/challenges")).status_code == 200
    assert (await client.get(f"{API}/user-stats")).status_code == 401
    assert (await client.post(f"{API}/challenges", json={"title": "Anon"})).status_code == 401


def test_levels():
    assert level_for(0) == 1
    assert level_for(99) == 1
    assert level_for(100) == 2
    assert level_for(-5) == 1
