"""Application error taxonomy.

Every error is an ``HTTPException`` so routers and dependencies can simply
raise it; ``error_code`` is what ends up in the ``error`` field of the
response body.
"""

from typing import Any, Optional

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base class for errors rendered as ``ErrorResponse``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "InternalError"
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(
            status_code=status_code or self.status_code,
            detail=message or self.default_message,
        )
        self.details = details


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NotFound"
    default_message = "Not found"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "Unauthorized"
    default_message = "Not authenticated"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    error_code = "Forbidden"
    default_message = "Forbidden"


class ConflictError(AppError):
    # Duplicate usernames are reported as 400
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "Conflict"
    default_message = "Resource already exists"


class UploadError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "UploadRejected"
    default_message = "Upload rejected"


class InvalidRequestError(AppError):
    status_code = 422
    error_code = "ValidationError"
    default_message = "Request validation failed"


class StorageError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "InternalError"
    default_message = "Storage operation failed"
