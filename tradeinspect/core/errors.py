"""
Application error taxonomy
Each error carries the HTTP status it is reported with; main.py turns them into
{"message": ..., "errors": [...]} responses
"""
from typing import Any, List, Optional
from fastapi import status


class AppError(Exception):
    """Base class for errors reported to API callers"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(AppError):
    """Missing or malformed field"""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
    """Bad credentials, or an invalid or expired token"""
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Unique constraint violation"""
    status_code = status.HTTP_409_CONFLICT


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
