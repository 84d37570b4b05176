"""User management schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Public view of a user record; never carries the password."""

    username: str = Field(description="Username")
    profile_image: Optional[str] = Field(
        default=None, alias="profileImage", description="Public path of the profile image"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {"username": "alice", "profileImage": "/uploads/alice_1700000000000.png"}
        },
    )
