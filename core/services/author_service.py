# =============================================================================
# core/services/author_service.py - Author Business Logic
# =============================================================================
# Handles author CRUD operations and business logic.
# Separates HTTP concerns from database/business logic.
#
# Invariants kept here:
# - userName is unique across all authors (create and update)
# - Deleting an author first deletes every blog post referencing it
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.exceptions import DuplicateUsernameError, RecordNotFoundError
from core.models import Author, AuthorCreate, AuthorUpdate
from core.services.errors import store_operation
from core.services.validators import (
    AUTHOR_REQUIRED_FIELDS,
    validate_matching_ids,
    validate_required_fields,
    validate_unique_user_name,
)
from lib.document_store import DUPLICATE_KEY, StoreError
from lib.utils import normalize_id

if TYPE_CHECKING:
    from core.database import BlogRepository

logger = logging.getLogger(__name__)


class AuthorService:
    """
    Service for author management operations.

    Provides a clean interface between API routes and the repository.
    """

    def __init__(self, repository: "BlogRepository"):
        self.repository = repository

    def list_authors(self) -> list[Author]:
        with store_operation("listing authors"):
            return self.repository.list_authors()

    def create_author(self, payload: dict[str, Any]) -> Author:
        """
        Create a new author.

        Args:
            payload: Request body with firstName, lastName, userName

        Returns:
            The created Author

        Raises:
            MissingFieldError: If a required field is absent
            DuplicateUsernameError: If userName is already taken
            StorageFault: If the store fails
        """
        validate_required_fields(payload, AUTHOR_REQUIRED_FIELDS)
        request = AuthorCreate.model_validate(payload)

        with store_operation("adding author"):
            validate_unique_user_name(self.repository, request.user_name)
            try:
                author = self.repository.create_author(request)
            except StoreError as e:
                # Lost a race with a concurrent create; the unique index caught it
                if e.code == DUPLICATE_KEY:
                    raise DuplicateUsernameError(request.user_name) from e
                raise

        logger.info(f"Created author: {author.id} ({author.user_name})")
        return author

    def update_author(self, author_id: str, payload: dict[str, Any]) -> Author:
        """
        Partially update an author.

        Only firstName, lastName and userName present in the body are
        written.

        Raises:
            IdMismatchError: If path id and body id differ
            DuplicateUsernameError: If the new userName belongs to another author
            RecordNotFoundError: If the author doesn't exist
            StorageFault: If the store fails
        """
        author_id = validate_matching_ids(author_id, payload)
        fields = AuthorUpdate.model_validate(payload).to_fields()
        logger.debug(f"Author {author_id} fields to update: {sorted(fields)}")

        with store_operation("updating author"):
            if fields.get("user_name") is not None:
                validate_unique_user_name(
                    self.repository,
                    fields["user_name"],
                    exclude_author_id=author_id,
                )
            try:
                author = self.repository.update_author(author_id, fields)
            except StoreError as e:
                if e.code == DUPLICATE_KEY:
                    raise DuplicateUsernameError(fields.get("user_name", "")) from e
                raise

        if author is None:
            raise RecordNotFoundError("Author", author_id)

        logger.info(f"Updated author: {author_id}")
        return author

    def delete_author(self, author_id: str) -> int:
        """
        Delete an author and every blog post referencing it.

        Two sequential store calls, not a transaction. If the second one
        fails the posts are already gone; if the process dies in between,
        surviving posts resolve to "no author" on read.

        Returns:
            Number of blog posts removed by the cascade
        """
        author_id = normalize_id(author_id)
        if author_id is None:
            return 0

        with store_operation("deleting author"):
            removed_posts = self.repository.delete_blogposts_by_author(author_id)
            existed = self.repository.delete_author(author_id)

        logger.info(
            f"Deleted author with id `{author_id}` "
            f"(existed={existed}, cascaded blog posts={removed_posts})"
        )
        return removed_posts
