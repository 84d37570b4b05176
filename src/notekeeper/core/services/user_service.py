"""User management service implementation."""

from typing import List, Optional

from fastapi import UploadFile

from ...config import Settings
from ...security import hash_password
from ..exceptions import ConflictError, NotFoundError
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.users import UserResponse
from ..storage import get_record_store
from ..uploads import has_upload, store_profile_image
from .interfaces import IUserService

logger = get_logger("services.users")


def _to_response(user: dict) -> UserResponse:
    return UserResponse(username=user["username"], profile_image=user.get("profileImage"))


class UserService(IUserService):
    """Admin user management plus self-service profile edits."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.user_repo = UserRepository(get_record_store(settings.users_path))

    async def list_users(self) -> List[UserResponse]:
        users = await self.user_repo.list_users()
        return [_to_response(u) for u in users]

    async def create_user(
        self, username: str, password: str, profile_image: Optional[UploadFile] = None
    ) -> UserResponse:
        if await self.user_repo.is_username_taken(username):
            raise ConflictError("Username already taken")

        image_path = None
        if has_upload(profile_image):
            stored = await store_profile_image(profile_image, username, self.settings)
            image_path = stored.stored_path

        user_data = {
            "username": username,
            "password": hash_password(password),
            "profileImage": image_path,
        }
        user = await self.user_repo.create_user(user_data)
        if user is None:
            # Lost a race with another create for the same name
            raise ConflictError("Username already taken")

        logger.info(f"Created user {username}")
        return _to_response(user)

    async def update_user(
        self,
        username: str,
        password: Optional[str] = None,
        profile_image: Optional[UploadFile] = None,
    ) -> UserResponse:
        """Partial update: blank password and missing image leave the record alone."""
        if not await self.user_repo.is_username_taken(username):
            raise NotFoundError("User not found")

        update_data = {}
        if password and password.strip():
            update_data["password"] = hash_password(password)
        if has_upload(profile_image):
            stored = await store_profile_image(profile_image, username, self.settings)
            update_data["profileImage"] = stored.stored_path

        user = await self.user_repo.update_user(username, update_data)
        if user is None:
            raise NotFoundError("User not found")

        if update_data:
            logger.info(f"Updated user {username}", extra={"fields": sorted(update_data)})
        return _to_response(user)

    async def update_own_profile(
        self,
        username: str,
        password: Optional[str] = None,
        profile_image: Optional[UploadFile] = None,
    ) -> UserResponse:
        """Same as update_user, for the session's own record."""
        return await self.update_user(username, password, profile_image)

    async def delete_user(self, username: str) -> None:
        if not await self.user_repo.delete_user(username):
            raise NotFoundError("User not found")
        logger.info(f"Deleted user {username}")
