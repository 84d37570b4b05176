"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, LoginResponse
from .common import ErrorResponse, HealthCheckResponse, SuccessResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate
from .users import UserResponse

__all__ = [
    # Auth schemas
    "LoginRequest",
    "LoginResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    # User schemas
    "UserResponse",
    # Common schemas
    "ErrorResponse",
    "SuccessResponse",
    "HealthCheckResponse",
]
