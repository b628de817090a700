from datetime import datetime, timedelta, UTC
from jose import jwt
from passlib.context import CryptContext
from taskapi import config

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=config.BCRYPT_ROUNDS)

BCRYPT_MAX_BYTES = 72


def _too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > BCRYPT_MAX_BYTES


def hash_password(password: str) -> str:
    """Hash a password after validating bcrypt's 72-byte limit.

    Raises ValueError if the UTF-8 encoding of the password exceeds 72 bytes.
    """
    if _too_long(password):
        raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext password against a hash in constant time.

    bcrypt only looks at the first 72 bytes, so a longer password could match
    a stored one it merely starts with. Such passwords can never have been
    hashed by hash_password and are rejected outright.
    """
    if _too_long(plain):
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # malformed stored hash
        return False


def create_token(user_id: int, now: datetime = None) -> str:
    issued = now or datetime.now(UTC)
    expire = issued + timedelta(hours=config.TOKEN_EXPIRE_HOURS)
    claims = {"user_id": user_id, "exp": int(expire.timestamp())}  # JWT spec uses Unix timestamp
    return jwt.encode(claims, config.SECRET, algorithm=config.ALGORITHM)


def decode_token(token: str) -> dict:
    """Return the verified claims. jwt.decode checks signature and exp."""
    return jwt.decode(token, config.SECRET, algorithms=[config.ALGORITHM])
