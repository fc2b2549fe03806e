import os
import time
import uuid
import jwt
from typing import Any, Dict

ALG = os.getenv("JWT_ALG", "HS256")
SECRET = os.environ.get("JWT_SECRET", "change_me")
ACCESS_TTL = int(os.getenv("JWT_ACCESS_TTL_SECONDS", "3600"))
REFRESH_TTL = int(os.getenv("JWT_REFRESH_TTL_SECONDS", "2592000"))


def _mint(user_id: uuid.UUID | str, typ: str, ttl: int) -> str:
    now = int(time.time())
    claims = {"sub": str(user_id), "iat": now, "exp": now + ttl, "typ": typ}
    return jwt.encode(claims, SECRET, algorithm=ALG)


def mint_access(user_id: uuid.UUID | str) -> str:
    return _mint(user_id, "access", ACCESS_TTL)


def mint_refresh(user_id: uuid.UUID | str) -> str:
    return _mint(user_id, "refresh", REFRESH_TTL)


def decode_token(tok: str) -> Dict[str, Any]:
    """Decode and verify signature + expiry. Raises jwt.PyJWTError on any failure."""
    return jwt.decode(tok, SECRET, algorithms=[ALG])
