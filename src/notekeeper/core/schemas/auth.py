"""
Authentication schemas.

These schemas define the API contracts for login and session checks.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(description="Username")
    password: str = Field(description="User password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "alice", "password": "secret"}}
    )


class LoginResponse(BaseModel):
    """Successful login; the session itself travels in the cookie."""

    success: bool = Field(default=True)
    username: str = Field(description="Username")
    profile_image: Optional[str] = Field(default=None, alias="profileImage")

    model_config = ConfigDict(populate_by_name=True)
