"""Pydantic schemas for API requests and responses."""

from docshelf.schemas.auth import AdminDetails, AuthResponse, LoginRequest, RefreshRequest
from docshelf.schemas.collection import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    CollectionCreate,
    CollectionResponse,
    CollectionUpdate,
)
from docshelf.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
)
from docshelf.schemas.knowledge_base import (
    ArticleCreate,
    ArticleNode,
    ArticleResponse,
    ArticleUpdate,
    KnowledgeBaseCategoryCreate,
    KnowledgeBaseCategoryResponse,
    KnowledgeBaseCategoryUpdate,
    KnowledgeBaseCreate,
    KnowledgeBaseResponse,
    KnowledgeBaseUpdate,
)
from docshelf.schemas.page import (
    PageCreate,
    PageImportRequest,
    PageNode,
    PageResponse,
    PageUpdate,
)
from docshelf.schemas.reader import (
    ArticleDetailResponse,
    Breadcrumb,
    CategoryContent,
    CollectionContentResponse,
    HeadingResponse,
    KnowledgeBaseCategoryContent,
    KnowledgeBaseContentResponse,
    NavLink,
    PageDetailResponse,
)
from docshelf.schemas.search import ArticleSearchResult, PageSearchResult

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Auth
    "LoginRequest",
    "RefreshRequest",
    "AdminDetails",
    "AuthResponse",
    # Collections
    "CollectionCreate",
    "CollectionUpdate",
    "CollectionResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "PageCreate",
    "PageUpdate",
    "PageImportRequest",
    "PageResponse",
    "PageNode",
    # Knowledge bases
    "KnowledgeBaseCreate",
    "KnowledgeBaseUpdate",
    "KnowledgeBaseResponse",
    "KnowledgeBaseCategoryCreate",
    "KnowledgeBaseCategoryUpdate",
    "KnowledgeBaseCategoryResponse",
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleNode",
    # Reader
    "HeadingResponse",
    "Breadcrumb",
    "NavLink",
    "CategoryContent",
    "CollectionContentResponse",
    "PageDetailResponse",
    "KnowledgeBaseCategoryContent",
    "KnowledgeBaseContentResponse",
    "ArticleDetailResponse",
    # Search
    "PageSearchResult",
    "ArticleSearchResult",
]
