"""Seed a demo account (demouser / demopassword) with a small men's wardrobe and outfits.

Usage: DATABASE_URL=... python -m scripts.create_demo_user
"""
from __future__ import annotations

import asyncio
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

from app.auth.passwords import hash_pw
from app.core.config import settings
from app.models.models import Outfit, User, WardrobeItem

USERNAME = "demouser"
PASSWORD = "demopassword"

# name, category, subcategory, color, season
ITEMS = [
    ("White Oxford Shirt", "tops", "shirt", "white", "all"),
    ("Navy Blue Polo", "tops", "shirt", "navy", "spring,summer"),
    ("Grey Crewneck T-shirt", "tops", "t-shirt", "grey", "all"),
    ("Black Turtleneck Sweater", "tops", "sweater", "black", "fall,winter"),
    ("Blue Denim Shirt", "tops", "shirt", "blue", "spring,fall"),
    ("Dark Blue Slim Jeans", "bottoms", "jeans", "dark blue", "all"),
    ("Khaki Chinos", "bottoms", "pants", "khaki", "spring,summer"),
    ("Grey Wool Trousers", "bottoms", "pants", "grey", "fall,winter"),
    ("Black Dress Pants", "bottoms", "pants", "black", "all"),
    ("Navy Blazer", "outerwear", "blazer", "navy", "all"),
    ("Black Leather Jacket", "outerwear", "jacket", "black", "fall,spring"),
    ("Tan Trench Coat", "outerwear", "coat", "tan", "fall,spring"),
    ("Grey Wool Overcoat", "outerwear", "coat", "grey", "winter"),
    ("Brown Leather Oxford Shoes", "shoes", "dress shoes", "brown", "all"),
    ("White Sneakers", "shoes", "sneakers", "white", "all"),
    ("Black Chelsea Boots", "shoes", "boots", "black", "fall,winter"),
    ("Brown Loafers", "shoes", "loafers", "brown", "spring,summer,fall"),
    ("Black Leather Belt", "accessories", "belt", "black", "all"),
    ("Silver Watch", "accessories", "watch", "silver", "all"),
    ("Navy Blue Tie", "accessories", "tie", "navy", "all"),
    ("Brown Leather Wallet", "accessories", "wallet", "brown", "all"),
]

OUTFITS = [
    {
        "name": "Business Professional",
        "items": ["White Oxford Shirt", "Grey Wool Trousers", "Navy Blazer", "Brown Leather Oxford Shoes",
                  "Black Leather Belt", "Silver Watch", "Navy Blue Tie"],
        "occasion": "work", "season": "all", "favorite": True,
        "weather_conditions": "sunny,cloudy", "mood": "professional",
    },
    {
        "name": "Smart Casual",
        "items": ["Navy Blue Polo", "Khaki Chinos", "Brown Loafers", "Silver Watch", "Black Leather Belt"],
        "occasion": "casual", "season": "spring,summer", "favorite": True,
        "weather_conditions": "sunny,cloudy", "mood": "relaxed",
    },
    {
        "name": "Night Out",
        "items": ["Black Turtleneck Sweater", "Dark Blue Slim Jeans", "Black Chelsea Boots",
                  "Black Leather Jacket", "Silver Watch"],
        "occasion": "evening", "season": "fall,winter", "favorite": True,
        "weather_conditions": "cloudy,cold", "mood": "confident",
    },
    {
        "name": "Casual Weekend",
        "items": ["Grey Crewneck T-shirt", "Dark Blue Slim Jeans", "White Sneakers", "Brown Leather Wallet"],
        "occasion": "casual", "season": "all", "favorite": True,
        "weather_conditions": "sunny,cloudy", "mood": "relaxed",
    },
    {
        "name": "Fall Layers",
        "items": ["Blue Denim Shirt", "Dark Blue Slim Jeans", "Tan Trench Coat", "Brown Leather Oxford Shoes"],
        "occasion": "casual", "season": "fall", "favorite": False,
        "weather_conditions": "cloudy,windy", "mood": "relaxed",
    },
    {
        "name": "Winter Formal",
        "items": ["White Oxford Shirt", "Black Dress Pants", "Grey Wool Overcoat", "Black Chelsea Boots",
                  "Silver Watch", "Navy Blue Tie"],
        "occasion": "formal", "season": "winter", "favorite": True,
        "weather_conditions": "cold,snowy", "mood": "confident",
    },
]


async def _run() -> None:
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    Session = async_sessionmaker(engine, expire_on_commit=False)
    async with Session() as session:
        # start fresh; cascades take the wardrobe and outfits with it
        await session.execute(delete(User).where(User.username == USERNAME))
        user = User(id=uuid.uuid4(), username=USERNAME, fullname="Demo User", password_hash=hash_pw(PASSWORD))
        session.add(user)
        await session.flush()

        by_name: dict[str, str] = {}
        for name, category, subcategory, color, season in ITEMS:
            item = WardrobeItem(
                id=uuid.uuid4(),
                user_id=user.id,
                name=name,
                category=category,
                subcategory=subcategory,
                color=color,
                season=season,
                tags=[subcategory.replace(" ", "-")],
            )
            session.add(item)
            by_name[name] = str(item.id)

        for entry in OUTFITS:
            data = dict(entry)
            names = data.pop("items")
            session.add(Outfit(user_id=user.id, item_ids=[by_name[n] for n in names], source="seed", **data))
        await session.commit()

        count = len((await session.execute(select(WardrobeItem.id).where(WardrobeItem.user_id == user.id))).all())
        print(f"Demo user ready: {USERNAME} / {PASSWORD} ({count} items, {len(OUTFITS)} outfits)")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(_run())
