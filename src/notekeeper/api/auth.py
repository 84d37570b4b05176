"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, Response

from ..config import Settings, get_settings
from ..core.schemas.auth import LoginRequest, LoginResponse
from ..core.schemas.common import SuccessResponse
from ..core.schemas.users import UserResponse
from ..core.services import AuthService
from ..middleware.auth import get_current_username

router = APIRouter(tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
):
    """Check credentials and set the session cookie."""
    auth_service = AuthService(settings)
    body, token = await auth_service.authenticate_user(request)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        path="/",
        httponly=True,
        samesite="strict",
        secure=settings.is_production,
    )
    return body


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response, settings: Settings = Depends(get_settings)):
    """Clear the session cookie."""
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        samesite="strict",
        secure=settings.is_production,
    )
    return SuccessResponse()


@router.get("/check-auth", response_model=UserResponse)
async def check_auth(
    current_username: str = Depends(get_current_username),
    settings: Settings = Depends(get_settings),
):
    """Identity and profile image of the current session."""
    auth_service = AuthService(settings)
    return await auth_service.get_current_user(current_username)
