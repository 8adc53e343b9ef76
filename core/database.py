# =============================================================================
# core/database.py - Blog Repository
# =============================================================================
# Typed access to the two collections (authors, blogposts) on top of any
# DocumentStore backend.
#
# Responsibilities:
# - Convert store documents into Author / BlogPost models
# - Expose one method per storage operation the services need
# - Optionally resolve a post's author reference on reads
#
# What it does NOT do:
# - Validation (core.services.validators)
# - Error translation: StoreError propagates to the service layer
# - Caching: every call goes to the store
#
# Usage:
#   repo = BlogRepository(InMemoryDocumentStore())
#   post = repo.get_blogpost(post_id, resolve_author=True)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Iterable

from lib.document_store import DocumentStore
from lib.utils import normalize_id

from core.models import Author, AuthorCreate, BlogPost, BlogPostCreate
from core.services.resolver import resolve_author_for_read, resolve_authors_for_read

logger = logging.getLogger(__name__)

DEFAULT_AUTHORS_COLLECTION = "authors"
DEFAULT_BLOGPOSTS_COLLECTION = "blogposts"


class BlogRepository:
    """
    Repository for authors and blog posts.

    Not-found is always a None / False / 0 result. Store failures surface as
    lib.document_store.StoreError.
    """

    def __init__(
        self,
        store: DocumentStore,
        authors_collection: str = DEFAULT_AUTHORS_COLLECTION,
        blogposts_collection: str = DEFAULT_BLOGPOSTS_COLLECTION,
    ):
        self.store = store
        self.authors_collection = authors_collection
        self.blogposts_collection = blogposts_collection

    # -------------------------------------------------------------------------
    # Authors
    # -------------------------------------------------------------------------

    def list_authors(self) -> list[Author]:
        documents = self.store.find(self.authors_collection)
        return [Author.from_document(d) for d in documents]

    def get_author(self, author_id: str | None) -> Author | None:
        author_id = normalize_id(author_id)
        if author_id is None:
            return None
        document = self.store.get(self.authors_collection, author_id)
        return Author.from_document(document) if document else None

    def get_authors_by_ids(self, author_ids: Iterable[str]) -> dict[str, Author]:
        """Batch lookup. Returns {id: Author} for the ids that exist."""
        wanted = {i for i in (normalize_id(a) for a in author_ids) if i is not None}
        if not wanted:
            return {}
        documents = self.store.find_by_ids(self.authors_collection, wanted)
        authors = (Author.from_document(d) for d in documents)
        return {author.id: author for author in authors}

    def find_author_by_user_name(self, user_name: str) -> Author | None:
        documents = self.store.find(self.authors_collection, {"user_name": user_name})
        return Author.from_document(documents[0]) if documents else None

    def create_author(self, payload: AuthorCreate) -> Author:
        document = self.store.insert(self.authors_collection, payload.to_document())
        return Author.from_document(document)

    def update_author(self, author_id: str, fields: dict[str, Any]) -> Author | None:
        document = self.store.update(self.authors_collection, author_id, fields)
        return Author.from_document(document) if document else None

    def delete_author(self, author_id: str) -> bool:
        return self.store.delete(self.authors_collection, author_id)

    # -------------------------------------------------------------------------
    # Blog posts
    # -------------------------------------------------------------------------

    def list_blogposts(self, resolve_author: bool = False) -> list[BlogPost]:
        documents = self.store.find(self.blogposts_collection, order_by="created")
        posts = [BlogPost.from_document(d) for d in documents]
        if resolve_author:
            posts = resolve_authors_for_read(self, posts)
        return posts

    def get_blogpost(self, post_id: str, resolve_author: bool = False) -> BlogPost | None:
        post_id = normalize_id(post_id)
        if post_id is None:
            return None
        document = self.store.get(self.blogposts_collection, post_id)
        if document is None:
            return None
        post = BlogPost.from_document(document)
        return resolve_author_for_read(self, post) if resolve_author else post

    def create_blogpost(self, payload: BlogPostCreate) -> BlogPost:
        document = self.store.insert(self.blogposts_collection, payload.to_document())
        return BlogPost.from_document(document)

    def update_blogpost(self, post_id: str, fields: dict[str, Any]) -> BlogPost | None:
        document = self.store.update(self.blogposts_collection, post_id, fields)
        return BlogPost.from_document(document) if document else None

    def delete_blogpost(self, post_id: str) -> bool:
        return self.store.delete(self.blogposts_collection, post_id)

    def delete_blogposts_by_author(self, author_id: str) -> int:
        deleted = self.store.delete_many(self.blogposts_collection, {"author_id": author_id})
        logger.debug(f"Removed {deleted} blog posts referencing author {author_id}")
        return deleted
