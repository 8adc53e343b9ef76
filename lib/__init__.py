# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - document_store.py: DocumentStore interface + in-memory backend
# - supabase_client.py: Supabase-backed DocumentStore
# - utils.py: Shared utilities (error base class, id helpers)
#
# These modules know nothing about authors or blog posts and can be tested
# in isolation.
# =============================================================================

from lib.document_store import (
    DUPLICATE_KEY,
    DocumentStore,
    InMemoryDocumentStore,
    StoreError,
)
from lib.utils import ApplicationError, new_id, normalize_id, utc_now

__all__ = [
    # Stores
    "DocumentStore",
    "InMemoryDocumentStore",
    "StoreError",
    "DUPLICATE_KEY",
    # Utils
    "ApplicationError",
    "new_id",
    "normalize_id",
    "utc_now",
]
