"""Reader services."""

from docshelf.reader.services.collection_reader_service import CollectionReaderService
from docshelf.reader.services.knowledge_base_reader_service import (
    KnowledgeBaseReaderService,
)
from docshelf.reader.services.search_service import SearchService

__all__ = [
    "CollectionReaderService",
    "KnowledgeBaseReaderService",
    "SearchService",
]
