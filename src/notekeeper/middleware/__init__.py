"""Middleware for authentication and other cross-cutting concerns."""

from .auth import SessionCookie, get_current_username, require_admin

__all__ = ["get_current_username", "require_admin", "SessionCookie"]
