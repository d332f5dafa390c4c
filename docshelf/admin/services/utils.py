"""
Admin Service Utilities

Helpers shared by the admin services.
"""

from typing import Any, Optional

from pydantic import BaseModel

from docshelf.core.exceptions import ValidationError
from docshelf.core.utils import slugify


def resolve_slug(slug: Optional[str], source: str) -> str:
    """Use the explicit slug, or derive one from a title or name.

    Raises:
        ValidationError: If nothing URL-safe is left
    """
    resolved = slugify(slug or source)
    if not resolved:
        raise ValidationError(
            "Could not derive a slug; provide one explicitly",
            details={"source": source},
        )
    return resolved


def collect_changes(data: BaseModel, nullable: tuple[str, ...] = ()) -> dict[str, Any]:
    """Fields the client actually sent.

    An explicit null is kept only for columns that accept it; for the rest
    it means "leave unchanged".

    Example:
        collect_changes(PageUpdate(parent_id=None, title=None), ("parent_id",))
        → {"parent_id": None}
    """
    changes = data.model_dump(exclude_unset=True)
    return {
        field: value
        for field, value in changes.items()
        if value is not None or field in nullable
    }
