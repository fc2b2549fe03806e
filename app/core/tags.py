import re
import unicodedata
from typing import Iterable

MAX_TAGS = 20
MAX_TAG_LEN = 32


def normalize_tag(s: str) -> str:
    """Lowercase ascii slug; "Date Night!" -> "date-night". Raises ValueError when empty or too long."""
    s = unicodedata.normalize("NFKD", s or "").encode("ascii", "ignore").decode()
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    s = re.sub(r"-{2,}", "-", s).strip("-")
    if not (1 <= len(s) <= MAX_TAG_LEN):
        raise ValueError("invalid_length")
    return s


def normalize_many(xs: Iterable[str] | None) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for x in xs or []:
        t = normalize_tag(x)
        if t not in seen:
            seen.add(t)
            out.append(t)
    return out[:MAX_TAGS]
