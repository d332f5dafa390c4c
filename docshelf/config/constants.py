"""
Application Constants

Centralized constants used throughout the application.
"""

from enum import Enum


class ContentType(str, Enum):
    """Storage format of a page body."""

    MARKDOWN = "markdown"
    HTML = "html"


# Default icon shown next to a collection in the reader
DEFAULT_COLLECTION_ICON = "FileText"

# Snippet window around a search hit
SNIPPET_CONTEXT_CHARS = 50
SNIPPET_FALLBACK_CHARS = 100
SNIPPET_ELLIPSIS = "..."

# Content cache key namespaces
CACHE_PREFIX = "content:"
CACHE_COLLECTION_NAMESPACE = "collection"
CACHE_KNOWLEDGE_BASE_NAMESPACE = "kb"

# Slug length limit shared by every sluggable entity
SLUG_MAX_LENGTH = 100
