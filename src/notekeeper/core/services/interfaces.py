"""
Service interfaces for NoteKeeper.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from fastapi import UploadFile

from ..schemas.auth import LoginRequest, LoginResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..schemas.users import UserResponse


class IAuthService(ABC):
    """Login and session identity."""

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> tuple[LoginResponse, str]:
        """Check credentials; returns the response body and a session token."""
        pass

    @abstractmethod
    async def get_current_user(self, username: str) -> UserResponse:
        """Profile of the session's own user."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    async def list_notes(self) -> List[NoteResponse]:
        """List all notes."""
        pass

    @abstractmethod
    async def get_note(self, note_id: int) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def create_note(self, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def update_note(self, note_id: int, request: NoteUpdate) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: int) -> None:
        """Delete note."""
        pass


class IUserService(ABC):
    """User management."""

    @abstractmethod
    async def list_users(self) -> List[UserResponse]:
        """List users without passwords."""
        pass

    @abstractmethod
    async def create_user(
        self, username: str, password: str, profile_image: Optional[UploadFile] = None
    ) -> UserResponse:
        """Create a user."""
        pass

    @abstractmethod
    async def update_user(
        self,
        username: str,
        password: Optional[str] = None,
        profile_image: Optional[UploadFile] = None,
    ) -> UserResponse:
        """Update password and/or image of a user."""
        pass

    @abstractmethod
    async def delete_user(self, username: str) -> None:
        """Delete a user."""
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Overall health."""
        pass

    @abstractmethod
    async def check_store_health(self, store_name: str) -> Dict[str, Any]:
        """Readability of one record store."""
        pass
