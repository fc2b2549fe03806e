import uuid
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.auth.jwt import decode_token

bearer = HTTPBearer(auto_error=False)


def token_subject(tok: str, typ: str) -> uuid.UUID:
    data = decode_token(tok)
    if data.get("typ") != typ:
        raise jwt.InvalidTokenError("wrong token type")
    try:
        return uuid.UUID(str(data.get("sub")))
    except ValueError as e:
        raise jwt.InvalidTokenError("bad subject") from e


def get_current_user_id(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> uuid.UUID:
    if not creds:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="unauthorized")
    try:
        return token_subject(creds.credentials, "access")
    except jwt.PyJWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="unauthorized")

