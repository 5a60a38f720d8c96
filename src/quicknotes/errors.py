from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the API client. These errors should not contain any
    sensitive information.
    """


class ValidationError(UserError):
    """Raised when a request payload fails validation."""
