import os
import tempfile

# must be set before app modules build the engine
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{tempfile.gettempdir()}/closet-test-{os.getpid()}.db"
os.environ["LLM_ENABLED"] = "false"

import httpx
import pytest
from asgi_lifespan import LifespanManager

from app.main import app
from app.auth import deps as auth_deps
from app.auth.passwords import hash_pw
from app.core.db import Base, SessionLocal, engine
from app.models.models import User

from fixtures import OTHER_USER_ID, TEST_USER_ID


@pytest.fixture(autouse=True)
def override_auth():
    app.dependency_overrides[auth_deps.get_current_user_id] = lambda: TEST_USER_ID
    yield
    app.dependency_overrides.pop(auth_deps.get_current_user_id, None)


@pytest.fixture(autouse=True)
def memory_cache(monkeypatch):
    """Replace the Redis JSON helpers with a dict for every module that imported them."""
    store = {}

    async def _get(key):
        return store.get(key)

    async def _set(key, data, ttl):
        store[key] = data

    for mod in ("app.services.weather", "app.services.llm"):
        monkeypatch.setattr(f"{mod}.cache_json_get", _get)
        monkeypatch.setattr(f"{mod}.cache_json_set", _set)
    return store


@pytest.fixture
async def db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    async with SessionLocal() as session:
        session.add(User(id=TEST_USER_ID, username="cher", password_hash=hash_pw("whatever")))
        session.add(User(id=OTHER_USER_ID, username="amber", password_hash=hash_pw("whatever")))
        await session.commit()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client(db):
    async with LifespanManager(app):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
