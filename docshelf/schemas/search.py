"""
Search Schemas

Hits returned by the reader search endpoints.
"""

from pydantic import BaseModel


class PageSearchResult(BaseModel):
    """A published page matching the query."""

    id: str
    title: str
    slug: str
    collection_id: str
    collection_title: str
    collection_slug: str
    snippet: str


class ArticleSearchResult(BaseModel):
    """A published article matching the query."""

    id: str
    title: str
    slug: str
    knowledge_base_id: str
    knowledge_base_name: str
    knowledge_base_slug: str
    snippet: str
