# =============================================================================
# lib/document_store.py - Document Store Interface
# =============================================================================
# Collection-level access to JSON-like documents.
#
# Two backends implement the same interface:
# - SupabaseDocumentStore (lib/supabase_client.py): PostgREST tables
# - InMemoryDocumentStore (below): process-local dicts for dev and tests
#
# Contract shared by every backend:
# - "Not found" is a normal result (None / False / 0), never an exception
# - Any backend failure surfaces as StoreError
# - Documents go in and come out as plain dicts; the backend owns "id"
# - Single-document writes are atomic; nothing spans documents
#
# Usage:
#   store = InMemoryDocumentStore(unique={"authors": ("user_name",)})
#   doc = store.insert("authors", {"first_name": "Ada", ...})
#   store.get("authors", doc["id"])
# =============================================================================

from __future__ import annotations

import copy
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Iterable

from lib.utils import ApplicationError, new_id

logger = logging.getLogger(__name__)


class StoreError(ApplicationError):
    """
    Error raised by a document store backend.

    `code` tells callers what went wrong at the storage level, e.g.
    DUPLICATE_KEY when a unique index rejects a write.
    """

    def __init__(self, message: str, code: str = "STORE_ERROR", **kwargs):
        super().__init__(message, code=code, **kwargs)


DUPLICATE_KEY = "DUPLICATE_KEY"


class DocumentStore(ABC):
    """
    Abstract document store.

    Filters are simple equality matches: {"author_id": "..."} selects every
    document whose author_id equals that value.
    """

    @abstractmethod
    def insert(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        """Insert a document and return it as stored (with its id)."""

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Fetch one document by id, or None."""

    @abstractmethod
    def find(
        self,
        collection: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch every document matching `filters`, ascending by `order_by` if given."""

    @abstractmethod
    def find_by_ids(self, collection: str, ids: Iterable[str]) -> list[dict[str, Any]]:
        """Fetch the documents whose id is in `ids`. Unknown ids are skipped."""

    @abstractmethod
    def update(
        self,
        collection: str,
        doc_id: str,
        fields: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Merge `fields` into a document. Returns the updated document, or None."""

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> bool:
        """Delete one document. Returns False if it did not exist."""

    @abstractmethod
    def delete_many(self, collection: str, filters: dict[str, Any]) -> int:
        """Delete every document matching `filters`. Returns the count."""

    def ping(self) -> None:
        """Raise StoreError if the backend is unreachable."""

    def close(self) -> None:
        """Release backend resources."""


# =============================================================================
# In-Memory Backend
# =============================================================================

class InMemoryDocumentStore(DocumentStore):
    """
    Process-local document store.

    Documents are deep-copied on the way in and out so callers can never
    mutate stored state by accident. A single lock serializes writes.

    Args:
        unique: Per-collection field names that must be unique, mirroring a
            unique index on the real backend.
    """

    def __init__(self, unique: dict[str, Iterable[str]] | None = None):
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._unique = {name: tuple(fields) for name, fields in (unique or {}).items()}
        self._lock = threading.Lock()

    def _collection(self, name: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(name, {})

    @staticmethod
    def _matches(document: dict[str, Any], filters: dict[str, Any] | None) -> bool:
        if not filters:
            return True
        return all(document.get(key) == value for key, value in filters.items())

    def _check_unique(
        self,
        collection: str,
        candidate: dict[str, Any],
        skip_id: str | None = None,
    ) -> None:
        for field in self._unique.get(collection, ()):
            value = candidate.get(field)
            if value is None:
                continue
            for doc_id, existing in self._collection(collection).items():
                if doc_id != skip_id and existing.get(field) == value:
                    raise StoreError(
                        message=f"Duplicate value for unique field '{field}' in {collection}",
                        code=DUPLICATE_KEY,
                        details={"collection": collection, "field": field, "value": value},
                    )

    def insert(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        stored = copy.deepcopy(document)
        stored["id"] = str(stored.get("id") or new_id())
        with self._lock:
            if stored["id"] in self._collection(collection):
                raise StoreError(
                    message=f"Document already exists: {stored['id']}",
                    code=DUPLICATE_KEY,
                    details={"collection": collection, "id": stored["id"]},
                )
            self._check_unique(collection, stored)
            self._collection(collection)[stored["id"]] = stored
        logger.debug(f"Inserted {collection}/{stored['id']}")
        return copy.deepcopy(stored)

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        document = self._collection(collection).get(doc_id)
        return copy.deepcopy(document) if document is not None else None

    def find(
        self,
        collection: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
    ) -> list[dict[str, Any]]:
        with self._lock:
            documents = list(self._collection(collection).values())
        matched = [copy.deepcopy(d) for d in documents if self._matches(d, filters)]
        if order_by:
            # Stable sort keeps insertion order for ties; missing keys go first
            matched.sort(key=lambda d: (d.get(order_by) is not None, d.get(order_by)))
        return matched

    def find_by_ids(self, collection: str, ids: Iterable[str]) -> list[dict[str, Any]]:
        wanted = set(ids)
        with self._lock:
            documents = list(self._collection(collection).values())
        return [copy.deepcopy(d) for d in documents if d["id"] in wanted]

    def update(
        self,
        collection: str,
        doc_id: str,
        fields: dict[str, Any],
    ) -> dict[str, Any] | None:
        with self._lock:
            existing = self._collection(collection).get(doc_id)
            if existing is None:
                return None
            merged = {**existing, **copy.deepcopy(fields), "id": doc_id}
            self._check_unique(collection, merged, skip_id=doc_id)
            self._collection(collection)[doc_id] = merged
        return copy.deepcopy(merged)

    def delete(self, collection: str, doc_id: str) -> bool:
        with self._lock:
            return self._collection(collection).pop(doc_id, None) is not None

    def delete_many(self, collection: str, filters: dict[str, Any]) -> int:
        with self._lock:
            docs = self._collection(collection)
            doomed = [doc_id for doc_id, d in docs.items() if self._matches(d, filters)]
            for doc_id in doomed:
                del docs[doc_id]
        return len(doomed)

    def close(self) -> None:
        with self._lock:
            self._collections.clear()
