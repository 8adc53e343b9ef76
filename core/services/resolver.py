# =============================================================================
# core/services/resolver.py - Author Reference Resolution
# =============================================================================
# Turns a blog post's stored author_id into the Author it points to.
#
# Read path:  resolve_author_for_read / resolve_authors_for_read
#   - Referenced author exists  -> post.author is that Author
#   - author_id unset or dangling -> post.author is None ("no author")
#   Single reads go through the batch function with one element, so a post
#   resolves the same way whether it was fetched alone or in a list.
#
# Write path: resolve_author_for_write
#   - Author must exist, otherwise AuthorNotFoundError (nothing is created)
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.exceptions import AuthorNotFoundError
from core.models import Author, BlogPost
from lib.utils import normalize_id

if TYPE_CHECKING:
    from core.database import BlogRepository

logger = logging.getLogger(__name__)


def resolve_authors_for_read(
    repository: "BlogRepository",
    posts: list[BlogPost],
) -> list[BlogPost]:
    """
    Attach the referenced Author to every post, using one batched lookup.

    Dangling references are not an error: an author deleted while its
    posts were still being cascaded simply resolves to None.

    Args:
        repository: Where authors are looked up
        posts: Posts as read from the store

    Returns:
        New BlogPost objects (same order) with `author` set or None
    """
    author_ids = {p.author_id for p in posts if normalize_id(p.author_id)}
    authors = repository.get_authors_by_ids(author_ids) if author_ids else {}

    resolved = []
    for post in posts:
        author = authors.get(normalize_id(post.author_id)) if post.author_id else None
        if post.author_id and author is None:
            logger.debug(f"Blog post {post.id} references missing author {post.author_id}")
        resolved.append(post.with_author(author))
    return resolved


def resolve_author_for_read(repository: "BlogRepository", post: BlogPost) -> BlogPost:
    """Attach the referenced Author to a single post (or None if unresolvable)."""
    return resolve_authors_for_read(repository, [post])[0]


def resolve_author_for_write(repository: "BlogRepository", author_id: str | None) -> Author:
    """
    Look up the author a new post will reference.

    Raises:
        AuthorNotFoundError: If no author has this id
    """
    author = repository.get_author(author_id)
    if author is None:
        raise AuthorNotFoundError(author_id)
    return author
