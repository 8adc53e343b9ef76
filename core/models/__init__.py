# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - author.py: Author record and create/update payloads
# - blogpost.py: BlogPost/Comment records and create/update payloads
#
# Wire shapes (what clients see) are produced by core.services.serializer,
# not by these models.
# =============================================================================

from .author import Author, AuthorCreate, AuthorUpdate
from .blogpost import BlogPost, BlogPostCreate, BlogPostUpdate, Comment

__all__ = [
    # Author
    "Author",
    "AuthorCreate",
    "AuthorUpdate",
    # Blog post
    "BlogPost",
    "BlogPostCreate",
    "BlogPostUpdate",
    "Comment",
]
