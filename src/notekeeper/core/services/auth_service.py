"""Authentication service implementation."""

from ...config import Settings
from ...security import create_session_token, hash_password, needs_update, verify_password
from ..exceptions import NotFoundError, StorageError, UnauthorizedError
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, LoginResponse
from ..schemas.users import UserResponse
from ..storage import get_record_store
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.user_repo = UserRepository(get_record_store(settings.users_path))

    async def authenticate_user(self, request: LoginRequest) -> tuple[LoginResponse, str]:
        """Login user and issue a session token."""
        user = await self.user_repo.get_by_username(request.username)
        if not user or not verify_password(request.password, user.get("password") or ""):
            logger.warning(f"Failed login for {request.username!r}")
            raise UnauthorizedError("Invalid login credentials")

        if needs_update(user["password"]):
            # Legacy plaintext record; hash it now that we know the password
            try:
                await self.user_repo.update_user(
                    user["username"], {"password": hash_password(request.password)}
                )
                logger.info(f"Re-hashed stored password for {user['username']}")
            except StorageError as e:
                logger.warning(f"Failed to re-hash password for {user['username']}: {e.detail}")

        token = create_session_token(user["username"])
        response = LoginResponse(
            username=user["username"], profile_image=user.get("profileImage")
        )
        return response, token

    async def get_current_user(self, username: str) -> UserResponse:
        """Profile for the user named in the session."""
        user = await self.user_repo.get_by_username(username)
        if not user:
            raise NotFoundError("User not found")
        return UserResponse(username=user["username"], profile_image=user.get("profileImage"))

    async def ensure_initial_admin(self) -> bool:
        """Create the first admin account when configured and none exists yet."""
        password = self.settings.initial_admin_password
        if not password or not self.settings.admin_usernames:
            return False

        users = await self.user_repo.list_users()
        admins = set(self.settings.admin_usernames)
        if any(u.get("username") in admins for u in users):
            return False

        username = self.settings.admin_usernames[0]
        created = await self.user_repo.create_user(
            {"username": username, "password": hash_password(password), "profileImage": None}
        )
        if created:
            logger.info(f"Created initial admin account {username}")
        return created is not None
