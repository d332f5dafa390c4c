"""
Custom Exceptions

Every error the API returns on purpose is a ``DocshelfException``. The
subclass decides the HTTP status and the machine-readable code; the
exception handler turns it into:

    {"error": {"code": "NOT_FOUND", "message": "Page not found: intro", "details": {}}}
"""

from typing import Any, Optional


class DocshelfException(Exception):
    """Base exception for all Docshelf errors."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API response."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


class AuthenticationError(DocshelfException):
    """Missing, invalid or expired admin credentials."""

    status_code = 401
    error_code = "AUTHENTICATION_ERROR"


class ValidationError(DocshelfException):
    """Request is well-formed but refers to something it may not."""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class ConflictError(DocshelfException):
    """A slug is already taken in its scope."""

    status_code = 409
    error_code = "CONFLICT"


class NotFoundError(DocshelfException):
    """Lookup by id or slug found nothing (or only a draft, for readers)."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, key: Optional[str] = None) -> None:
        message = f"{resource} not found: {key}" if key else f"{resource} not found"
        super().__init__(message, details={"resource": resource})


class CollectionNotFoundError(NotFoundError):
    def __init__(self, key: str) -> None:
        super().__init__("Collection", key)


class CategoryNotFoundError(NotFoundError):
    def __init__(self, key: str) -> None:
        super().__init__("Category", key)


class PageNotFoundError(NotFoundError):
    def __init__(self, key: str) -> None:
        super().__init__("Page", key)


class KnowledgeBaseNotFoundError(NotFoundError):
    def __init__(self, key: str) -> None:
        super().__init__("Knowledge base", key)


class ArticleNotFoundError(NotFoundError):
    def __init__(self, key: str) -> None:
        super().__init__("Article", key)


class InvalidParentError(ValidationError):
    """An item was given itself as parent."""

    def __init__(self, item_id: str) -> None:
        super().__init__("An item cannot be its own parent", details={"item_id": item_id})


class CategoryMismatchError(ValidationError):
    """A category was referenced from a different container."""

    def __init__(self, category_id: str, container_id: str) -> None:
        super().__init__(
            "Category does not belong to the target container",
            details={"category_id": category_id, "container_id": container_id},
        )
