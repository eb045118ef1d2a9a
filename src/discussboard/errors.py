from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested entry or reply is not found."""

    def __init__(self, message: str = "Entry not found") -> None:
        super().__init__(message)


class AuthorizationError(UserError):
    """Raised when the admin secret is missing or does not match."""

    def __init__(self, message: str = "Invalid admin password") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class StorageError(Exception):
    """Raised when the board storage backend is unavailable or holds corrupt data."""
