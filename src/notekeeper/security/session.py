"""Session token utilities.

A session token names the user (``sub``) and carries a random secret
(``jti``). It is signed, so the identity cannot be claimed by writing a
cookie by hand.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config import get_settings

TOKEN_TYPE = "session"


def create_session_token(username: str, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a signed session token for ``username``."""
    settings = get_settings()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(hours=settings.session_expire_hours)

    to_encode = {
        "sub": username,
        "jti": secrets.token_hex(32),
        "type": TOKEN_TYPE,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_session_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a session token; ``None`` when invalid or expired."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None

    if payload.get("type") != TOKEN_TYPE:
        return None
    return payload


def get_username_from_token(token: str) -> Optional[str]:
    """Extract the username from a session token."""
    payload = decode_session_token(token)
    if not payload:
        return None

    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        return None
    return username
