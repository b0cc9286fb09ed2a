# eventra/utils/auth_utils.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt
from loguru import logger

from eventra.config import Settings, get_settings
from eventra.models.user import TokenData

TOKEN_COOKIE = "token"


def create_access_token(data: dict, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token for the given claims.

    With ``access_token_expire_minutes`` set to 0 and no explicit delta, the
    token carries no ``exp`` claim and stays valid until the secret rotates.
    """
    to_encode = data.copy()
    if expires_delta is None and settings.access_token_expire_minutes > 0:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    if expires_delta is not None:
        to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> TokenData:
    """Verify signature and expiry; raises JWTError on any failure."""
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    user_id = payload.get("id")
    if user_id is None:
        raise JWTError("Token carries no user id")
    return TokenData(id=str(user_id), email=payload.get("email", ""))


async def get_current_user(request: Request, settings: Settings = Depends(get_settings)) -> TokenData:
    """Extract the token from the auth cookie and return the identity it proves."""
    token = request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    try:
        return decode_access_token(token, settings)
    except JWTError as exc:
        logger.warning(f"Rejected token on {request.url.path}: {exc}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
