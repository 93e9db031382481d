"""JWT verification for admin requests.

Tokens come from the external auth provider, signed with the shared secret.
create_access_token exists for local tooling (scripts/create_admin_token.py) and tests.
"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from portfolio.core.config import settings


def create_access_token(subject: str, role: str | None = None, expires_minutes: int | None = None) -> str:
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    to_encode = {"sub": str(subject), "exp": expire, "type": "access"}
    if role:
        to_encode["role"] = role
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict | None:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError:
        return None
