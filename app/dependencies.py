# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Tests swap the store with:
#   app.dependency_overrides[get_store] = lambda: InMemoryDocumentStore(...)
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.database import BlogRepository
from core.services import AuthorService, BlogPostService
from lib.document_store import DocumentStore, InMemoryDocumentStore


def build_store() -> DocumentStore:
    """Create the DocumentStore selected by STORE_BACKEND."""
    if settings.STORE_BACKEND == "memory":
        return InMemoryDocumentStore(unique={settings.AUTHORS_TABLE: ("user_name",)})

    from lib.supabase_client import SupabaseDocumentStore

    return SupabaseDocumentStore.from_settings()


@lru_cache
def get_store() -> DocumentStore:
    """
    Get the process-wide document store.

    Created on first use and shared by every request.
    """
    return build_store()


def get_repository(store: Annotated[DocumentStore, Depends(get_store)]) -> BlogRepository:
    return BlogRepository(
        store,
        authors_collection=settings.AUTHORS_TABLE,
        blogposts_collection=settings.BLOGPOSTS_TABLE,
    )


def get_author_service(
    repository: Annotated[BlogRepository, Depends(get_repository)],
) -> AuthorService:
    return AuthorService(repository)


def get_blogpost_service(
    repository: Annotated[BlogRepository, Depends(get_repository)],
) -> BlogPostService:
    return BlogPostService(repository)


# Type aliases for dependency injection
StoreDep = Annotated[DocumentStore, Depends(get_store)]
AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
BlogPostServiceDep = Annotated[BlogPostService, Depends(get_blogpost_service)]
