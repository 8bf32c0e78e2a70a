"""
Exception hierarchy for the user store.

Every store failure is reported to the caller as one of these types. All of
them inherit from UserStoreError and carry a user-facing message that is safe
to show outside the process.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserStoreError(Exception):
    """Base exception for all user store errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(UserStoreError):
    """Raised when a required field is missing or a change is not allowed."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        kwargs.setdefault("user_message", message)
        kwargs.setdefault("details", {"field": field})
        super().__init__(message, **kwargs)
        self.field = field


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(UserStoreError):
    """Raised when no user matches the given identifier or email."""

    def __init__(self, lookup: str, value: Any):
        super().__init__(
            f"User not found for {lookup}={value!r}",
            user_message="User not found.",
            details={"lookup": lookup, "value": value},
        )
        self.lookup = lookup
        self.value = value


# -----------------------------------------------------------------------------
# Uniqueness
# -----------------------------------------------------------------------------


class DuplicateEmailError(UserStoreError):
    """Raised when an insert or update would store an email that already exists."""

    def __init__(self, email: str):
        super().__init__(
            f"A user with email {email!r} already exists",
            user_message="A user with this email already exists.",
            details={"email": email},
        )
        self.email = email


# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------


class DatabaseError(UserStoreError):
    """Raised when the storage backend fails for a reason other than a known constraint."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        kwargs.setdefault("user_message", "Database operation failed. Please try again.")
        kwargs.setdefault("details", {"operation": operation})
        super().__init__(message, **kwargs)
        self.operation = operation


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Store errors give their own user_message; anything else gets a generic one.
    """
    if isinstance(exc, UserStoreError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong. Please try again."
