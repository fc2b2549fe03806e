import uuid

from .wardrobe import Piece, make_item, pieces

API = "/api"
TEST_USER_ID = uuid.UUID("00000000-0000-4000-8000-000000000001")
OTHER_USER_ID = uuid.UUID("00000000-0000-4000-8000-000000000002")

__all__ = ["API", "TEST_USER_ID", "OTHER_USER_ID", "Piece", "make_item", "pieces"]
