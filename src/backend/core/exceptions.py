"""
Election error taxonomy.

Every failure the core can report to a caller is one of these types. Each
carries the HTTP status it maps to and a stable ``error_type`` code, so the
API layer can render them without knowing about individual cases.
"""

from typing import Any, Optional

from fastapi import status


class ElectionError(Exception):
    """Base class for all typed election failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_type: str = "ElectionError"
    default_message: str = "Election request failed"

    def __init__(self, message: Optional[str] = None, context: Optional[dict[str, Any]] = None):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"detail": self.message, "error_type": self.error_type}


class Unauthenticated(ElectionError):
    """No identity is attached to the request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_type = "Unauthenticated"
    default_message = "Authentication required"


class Forbidden(ElectionError):
    """Identity is known but lacks the admin capability."""

    status_code = status.HTTP_403_FORBIDDEN
    error_type = "Forbidden"
    default_message = "Admin privileges required"


class NotFound(ElectionError):
    status_code = status.HTTP_404_NOT_FOUND
    error_type = "NotFound"
    default_message = "Resource not found"


class AlreadyRegistered(ElectionError):
    status_code = status.HTTP_409_CONFLICT
    error_type = "AlreadyRegistered"
    default_message = "Voter profile already exists for this user"


class DuplicateVoterId(ElectionError):
    status_code = status.HTTP_409_CONFLICT
    error_type = "DuplicateVoterId"
    default_message = "This voter ID is already registered"


class AlreadyVoted(ElectionError):
    status_code = status.HTTP_409_CONFLICT
    error_type = "AlreadyVoted"
    default_message = "You have already cast your vote in this election"


class ProfileRequired(ElectionError):
    status_code = status.HTTP_403_FORBIDDEN
    error_type = "ProfileRequired"
    default_message = "Voter profile not found. Please complete your profile"


class InvalidInput(ElectionError):
    status_code = 422
    error_type = "InvalidInput"
    default_message = "Invalid input"
