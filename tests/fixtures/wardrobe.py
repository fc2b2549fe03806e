from dataclasses import dataclass, field
from typing import List, Optional

import httpx


@dataclass
class Piece:
    """Plain record satisfying the assembler's item protocol."""
    id: str
    category: str
    color: Optional[str] = None
    tags: List[str] = field(default_factory=list)


def pieces(*rows: tuple) -> List[Piece]:
    return [Piece(id=r[0], category=r[1], color=r[2] if len(r) > 2 else None) for r in rows]


async def make_item(client: httpx.AsyncClient, name: str, category: str, **extra) -> dict:
    resp = await client.post("/api/wardrobe", json={"name": name, "category": category, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()
