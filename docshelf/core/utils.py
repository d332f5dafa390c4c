"""
Common Utilities

Slugs for URLs and UUID parsing for path and token values.
"""

import uuid

from slugify import slugify as python_slugify

from docshelf.config.constants import SLUG_MAX_LENGTH


def slugify(text: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Turn a title into a URL slug ("Getting Started!" -> "getting-started")."""
    return python_slugify(text, max_length=max_length, word_boundary=True)


def is_valid_uuid(value: str) -> bool:
    """Check if a string is a valid UUID."""
    try:
        uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


def parse_uuid(value: str | None) -> uuid.UUID | None:
    """Parse an optional UUID string, returning None for blanks and garbage."""
    if not value or not is_valid_uuid(value):
        return None
    return uuid.UUID(value)
