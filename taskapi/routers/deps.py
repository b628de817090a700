import logging
from dataclasses import dataclass
from typing import Optional
from fastapi import Cookie, HTTPException
from jose import ExpiredSignatureError, JWTError
from taskapi.utils.auth import decode_token

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "token"


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity proven by a verified session token."""

    user_id: int


def authenticate(token: Optional[str]) -> AuthenticatedUser:
    """Verify a session token and return the caller's identity.

    Raises HTTPException(401) when the token is missing, badly signed or expired.
    """
    if not token:
        raise HTTPException(status_code=401, detail="missing or malformed jwt")
    try:
        # jwt.decode validates exp automatically
        claims = decode_token(token)
    except ExpiredSignatureError:
        logger.info("Rejected expired session token")
        raise HTTPException(status_code=401, detail="invalid or expired jwt")
    except JWTError:
        logger.info("Rejected invalid session token")
        raise HTTPException(status_code=401, detail="invalid or expired jwt")

    user_id = claims.get("user_id")
    if not isinstance(user_id, int):
        raise HTTPException(status_code=401, detail="invalid or expired jwt")
    return AuthenticatedUser(user_id=user_id)


def get_current_user(token: Optional[str] = Cookie(None)) -> AuthenticatedUser:
    """Dependency form of authenticate for handlers that need the caller's id.

    FastAPI caches it per request, so the router-level declaration and the
    handler's share one value.
    """
    return authenticate(token)
