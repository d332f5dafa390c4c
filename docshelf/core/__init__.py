"""Core utilities module."""

from docshelf.core.exceptions import (
    AuthenticationError,
    ConflictError,
    DocshelfException,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "DocshelfException",
    "AuthenticationError",
    "ConflictError",
    "NotFoundError",
    "ValidationError",
]
