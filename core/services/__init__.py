# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .author_service import AuthorService
from .blogpost_service import BlogPostService
from .errors import store_operation

__all__ = [
    "AuthorService",
    "BlogPostService",
    "store_operation",
]
