"""
Search Snippets

Short excerpts shown under each search hit.
"""

from docshelf.config.constants import (
    SNIPPET_CONTEXT_CHARS,
    SNIPPET_ELLIPSIS,
    SNIPPET_FALLBACK_CHARS,
)


def snippet(content: str, query: str) -> str:
    """Cut an excerpt of content around the first match of query.

    The match is case-insensitive. The excerpt keeps up to
    SNIPPET_CONTEXT_CHARS characters on each side of the match and is
    marked with an ellipsis on any side that was cut. Without a match the
    opening SNIPPET_FALLBACK_CHARS characters are returned.

    Args:
        content: Full text of the page or article
        query: Search term as typed by the reader

    Returns:
        Excerpt text

    Example:
        >>> snippet("The quick brown fox jumps", "BROWN")
        'The quick brown fox jumps'
    """
    content = content or ""
    query = query or ""

    index = content.lower().find(query.lower())
    if index < 0:
        excerpt = content[:SNIPPET_FALLBACK_CHARS]
        if len(content) > SNIPPET_FALLBACK_CHARS:
            excerpt += SNIPPET_ELLIPSIS
        return excerpt

    start = max(0, index - SNIPPET_CONTEXT_CHARS)
    end = min(len(content), index + len(query) + SNIPPET_CONTEXT_CHARS)

    prefix = SNIPPET_ELLIPSIS if start > 0 else ""
    suffix = SNIPPET_ELLIPSIS if end < len(content) else ""
    return f"{prefix}{content[start:end]}{suffix}"
