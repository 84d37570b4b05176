"""Authentication dependencies.

Routes declare what they need: ``get_current_username`` for any logged-in
user, ``require_admin`` for the user-management routes. A request without a
valid session is always 401, on admin routes too; a valid session outside the
admin allow-list is 403.
"""

from typing import Optional

from fastapi import Depends, Request

from ..config import Settings, get_settings
from ..core.exceptions import ForbiddenError, UnauthorizedError
from ..security import get_username_from_token


class SessionCookie:
    """Reads and validates the session cookie."""

    def __init__(self, auto_error: bool = True):
        self.auto_error = auto_error

    async def __call__(
        self, request: Request, settings: Settings = Depends(get_settings)
    ) -> Optional[str]:
        token = request.cookies.get(settings.session_cookie_name)
        if not token:
            if self.auto_error:
                raise UnauthorizedError("Not authenticated")
            return None

        username = get_username_from_token(token)
        if not username:
            if self.auto_error:
                raise UnauthorizedError("Invalid or expired session")
            return None

        return username


# Dependency for getting the current username from the session cookie
async def get_current_username(username: str = Depends(SessionCookie())) -> str:
    """Get current authenticated username."""
    return username


async def require_admin(
    username: str = Depends(get_current_username),
    settings: Settings = Depends(get_settings),
) -> str:
    """Current username, provided it is on the admin allow-list."""
    if username not in settings.admin_usernames:
        raise ForbiddenError("Forbidden")
    return username
