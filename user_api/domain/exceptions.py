"""
Domain Exceptions
=================

Error taxonomy shared by every layer. Errors are raised where they are
detected and passed upward unchanged; only the HTTP layer translates them.
"""
from typing import Any


class UserDomainError(Exception):
    """Base exception for user operations."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(UserDomainError, ValueError):
    """Raised when a user fails the validation rules."""


class AlreadyExistsError(UserDomainError):
    """Raised when a user with the same email already exists."""
    
    def __init__(self, email: str) -> None:
        super().__init__("user with this email already exists")
        self.email = email


class NotFoundError(UserDomainError):
    """Raised when no user has the requested ID."""
    
    def __init__(self, user_id: Any) -> None:
        super().__init__("user not found")
        self.user_id = user_id


class StorageError(UserDomainError):
    """Raised when the storage backend fails (connectivity, SQL errors)."""
