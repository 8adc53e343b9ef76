# =============================================================================
# core/models/blogpost.py - Blog Post Schemas
# =============================================================================
# These models define the blog post record and its write payloads:
# - Comment: One entry of a post's ordered comment list
# - BlogPost: A stored post, optionally carrying its resolved Author
# - BlogPostCreate: Body of POST /blogposts
# - BlogPostUpdate: Body of PUT /blogposts/{id} (title/content only)
#
# A post stores only `author_id`. The `author` attribute is filled in at
# read time by core.services.resolver and is never persisted.
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lib.utils import utc_now

from .author import Author


class Comment(BaseModel):
    """A comment owned by its blog post. Not addressable on its own."""

    content: str = ""

    @classmethod
    def from_value(cls, value: Any) -> "Comment":
        # Comments are stored as {"content": ...}; bare strings are tolerated
        if isinstance(value, dict):
            return cls(content=str(value.get("content") or ""))
        return cls(content=str(value))


class BlogPost(BaseModel):
    """
    A stored blog post.

    Example document:
        {
            "id": "660e8400-...",
            "title": "Notes on the Analytical Engine",
            "content": "...",
            "author_id": "550e8400-...",
            "comments": [{"content": "Brilliant"}],
            "created": "2024-01-15T10:30:00+00:00"
        }
    """

    id: str = Field(..., min_length=1)
    title: str | None = None
    content: str | None = None

    # Reference to an Author document; may dangle after an interrupted cascade
    author_id: str | None = None

    # Insertion order is preserved
    comments: list[Comment] = Field(default_factory=list)

    created: datetime = Field(default_factory=utc_now)

    # Populated by resolution; None means "no author"
    author: Author | None = Field(default=None, exclude=True)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "BlogPost":
        """Create a BlogPost from a store document (author left unresolved)."""
        author_id = document.get("author_id")
        data: dict[str, Any] = {
            "id": str(document["id"]),
            "title": document.get("title"),
            "content": document.get("content"),
            "author_id": str(author_id) if author_id is not None else None,
            "comments": [Comment.from_value(c) for c in document.get("comments") or []],
        }
        if document.get("created") is not None:
            data["created"] = document["created"]
        return cls(**data)

    def with_author(self, author: Author | None) -> "BlogPost":
        """Return a copy carrying `author` as its resolved reference."""
        return self.model_copy(update={"author": author})


class BlogPostCreate(BaseModel):
    """
    Schema for creating a blog post.

    Example:
        {"title": "T", "content": "C", "author_id": "550e8400-..."}
    """

    model_config = ConfigDict(extra="ignore")

    title: str
    content: str
    author_id: str

    def to_document(self) -> dict[str, Any]:
        # New posts start with no comments; `created` is fixed here for good
        return {
            "title": self.title,
            "content": self.content,
            "author_id": self.author_id,
            "comments": [],
            "created": utc_now().isoformat(),
        }


class BlogPostUpdate(BaseModel):
    """
    Schema for updating a blog post.

    Only title and content are updatable; author_id, comments and created
    are ignored if sent.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    content: str | None = None

    @field_validator("title", "content")
    @classmethod
    def reject_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
