"""
API Utilities

Path and query ids arrive as strings so that a malformed id answers with
the usual 400 error envelope instead of FastAPI's 422.
"""

from typing import NoReturn
from uuid import UUID

from docshelf.core.exceptions import NotFoundError, ValidationError
from docshelf.core.utils import parse_uuid


def validate_uuid(value: str, field_name: str) -> UUID:
    """Parse ``value`` or fail with 400 naming the offending field."""
    parsed = parse_uuid(value)
    if parsed is None:
        raise ValidationError(
            f"Invalid {field_name}: must be a valid UUID",
            details={"field": field_name, "value": value},
        )
    return parsed


def raise_not_found(resource: str, resource_id: str | None = None) -> NoReturn:
    """404 for an admin lookup by id, e.g. ``raise_not_found("Page", page_id)``."""
    raise NotFoundError(resource, resource_id)
