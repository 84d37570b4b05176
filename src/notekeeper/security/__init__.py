"""Security utilities."""

from .password import hash_password, needs_update, verify_password
from .session import create_session_token, decode_session_token, get_username_from_token

__all__ = [
    "hash_password",
    "verify_password",
    "needs_update",
    "create_session_token",
    "decode_session_token",
    "get_username_from_token",
]
