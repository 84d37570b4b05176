"""User management API endpoints.

Create and update take multipart forms so a profile image can ride along.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ..config import Settings, get_settings
from ..core.schemas.users import UserResponse
from ..core.services import UserService
from ..middleware.auth import get_current_username, require_admin

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse], dependencies=[Depends(require_admin)])
async def list_users(settings: Settings = Depends(get_settings)):
    """List users (admins only)."""
    user_service = UserService(settings)
    return await user_service.list_users()


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_user(
    username: str = Form(..., min_length=1),
    password: str = Form(..., min_length=1),
    profile_image: Optional[UploadFile] = File(default=None, alias="profileImage"),
    settings: Settings = Depends(get_settings),
):
    """Create a user (admins only)."""
    user_service = UserService(settings)
    return await user_service.create_user(username, password, profile_image)


# Declared before /{username} so "profile" is never taken for a username
@router.put("/profile", response_model=UserResponse)
async def update_own_profile(
    password: Optional[str] = Form(default=None),
    profile_image: Optional[UploadFile] = File(default=None, alias="profileImage"),
    current_username: str = Depends(get_current_username),
    settings: Settings = Depends(get_settings),
):
    """Update the current user's password and/or image."""
    user_service = UserService(settings)
    return await user_service.update_own_profile(current_username, password, profile_image)


@router.put("/{username}", response_model=UserResponse, dependencies=[Depends(require_admin)])
async def update_user(
    username: str,
    password: Optional[str] = Form(default=None),
    profile_image: Optional[UploadFile] = File(default=None, alias="profileImage"),
    settings: Settings = Depends(get_settings),
):
    """Update a user's password and/or image (admins only)."""
    user_service = UserService(settings)
    return await user_service.update_user(username, password, profile_image)


@router.delete("/{username}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_user(username: str, settings: Settings = Depends(get_settings)):
    """Delete a user (admins only)."""
    user_service = UserService(settings)
    await user_service.delete_user(username)
