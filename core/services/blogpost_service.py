# =============================================================================
# core/services/blogpost_service.py - Blog Post Business Logic
# =============================================================================
# Handles blog post CRUD operations.
#
# Every read returns posts with their author resolved (or None), through
# the same resolver for single and list reads. Creates check the
# referenced author exactly once, before anything is written.
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.exceptions import RecordNotFoundError
from core.models import BlogPost, BlogPostCreate, BlogPostUpdate
from core.services.errors import store_operation
from core.services.resolver import resolve_author_for_write
from core.services.validators import (
    BLOGPOST_REQUIRED_FIELDS,
    validate_matching_ids,
    validate_required_fields,
)
from lib.utils import normalize_id

if TYPE_CHECKING:
    from core.database import BlogRepository

logger = logging.getLogger(__name__)


class BlogPostService:
    """Service for blog post operations."""

    def __init__(self, repository: "BlogRepository"):
        self.repository = repository

    def list_blogposts(self) -> list[BlogPost]:
        with store_operation("listing blogposts"):
            return self.repository.list_blogposts(resolve_author=True)

    def get_blogpost(self, post_id: str) -> BlogPost:
        """
        Get one blog post with its author resolved.

        Raises:
            RecordNotFoundError: If the post doesn't exist
            StorageFault: If the store fails
        """
        with store_operation("fetching blogpost"):
            post = self.repository.get_blogpost(post_id, resolve_author=True)

        if post is None:
            raise RecordNotFoundError("BlogPost", post_id)
        return post

    def create_blogpost(self, payload: dict[str, Any]) -> BlogPost:
        """
        Create a blog post for an existing author.

        Args:
            payload: Request body with title, content, author_id

        Returns:
            The created post, carrying the author it references

        Raises:
            MissingFieldError: If a required field is absent
            AuthorNotFoundError: If author_id doesn't match an author
            StorageFault: If the store fails
        """
        validate_required_fields(payload, BLOGPOST_REQUIRED_FIELDS)
        request = BlogPostCreate.model_validate(payload)

        with store_operation("adding blogpost"):
            author = resolve_author_for_write(self.repository, request.author_id)
            # Store the author's canonical id so the delete cascade matches it
            request = request.model_copy(update={"author_id": author.id})
            post = self.repository.create_blogpost(request)

        logger.info(f"Created blog post: {post.id} by author {author.id}")
        return post.with_author(author)

    def update_blogpost(self, post_id: str, payload: dict[str, Any]) -> BlogPost:
        """
        Partially update a blog post's title and/or content.

        Raises:
            IdMismatchError: If path id and body id differ
            RecordNotFoundError: If the post doesn't exist
            StorageFault: If the store fails
        """
        post_id = validate_matching_ids(post_id, payload)
        fields = BlogPostUpdate.model_validate(payload).to_fields()
        logger.debug(f"Blog post {post_id} fields to update: {sorted(fields)}")

        with store_operation("updating blogpost"):
            post = self.repository.update_blogpost(post_id, fields)

        if post is None:
            raise RecordNotFoundError("BlogPost", post_id)

        logger.info(f"Updated blog post: {post_id}")
        return post

    def delete_blogpost(self, post_id: str) -> bool:
        post_id = normalize_id(post_id)
        if post_id is None:
            return False

        with store_operation("deleting blogpost"):
            existed = self.repository.delete_blogpost(post_id)

        logger.info(f"Deleted blog post `{post_id}` (existed={existed})")
        return existed
