# =============================================================================
# lib/supabase_client.py - Supabase Document Store
# =============================================================================
# DocumentStore backend over Supabase (PostgREST) tables.
#
# Each collection maps to one table with an "id" uuid primary key. Nested
# values (e.g. blog post comments) live in JSONB columns, so documents
# round-trip as plain dicts.
#
# PostgREST error codes handled here:
# - PGRST116: .single() matched no rows      -> not found (None)
# - 22P02:    id is not a valid uuid          -> not found (None)
# - 23505:    unique constraint violated      -> StoreError(DUPLICATE_KEY)
#
# Usage:
#   store = SupabaseDocumentStore.from_settings()
#   author = store.get("authors", author_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Iterable

from supabase import Client, create_client
from supabase.client import ClientOptions

from app.config import settings
from lib.document_store import DUPLICATE_KEY, DocumentStore, StoreError

# Set up logging for this module
logger = logging.getLogger(__name__)

NO_ROWS = "PGRST116"
INVALID_TEXT_REPRESENTATION = "22P02"
UNIQUE_VIOLATION = "23505"


def _error_code(exc: Exception) -> str:
    code = getattr(exc, "code", None)
    if code:
        return str(code)
    text = str(exc)
    for known in (NO_ROWS, INVALID_TEXT_REPRESENTATION, UNIQUE_VIOLATION):
        if known in text:
            return known
    return ""


class SupabaseDocumentStore(DocumentStore):
    """
    Supabase-backed document store.

    The client is created lazily on first use, so the app can start (and
    report readiness problems) without valid credentials.

    Args:
        url: Supabase project URL
        key: service_role key (server-side access, bypasses RLS)
        timeout_s: Upper bound for every PostgREST call
        ping_table: Table queried by ping()
    """

    def __init__(
        self,
        url: str,
        key: str,
        timeout_s: float = 10.0,
        ping_table: str = "authors",
    ):
        self._url = url
        self._key = key
        self._timeout_s = timeout_s
        self._ping_table = ping_table
        self._client: Client | None = None

    @classmethod
    def from_settings(cls) -> "SupabaseDocumentStore":
        return cls(
            url=settings.SUPABASE_URL,
            key=settings.SUPABASE_SERVICE_KEY,
            timeout_s=settings.STORE_TIMEOUT_S,
            ping_table=settings.AUTHORS_TABLE,
        )

    def get_client(self) -> Client:
        """
        Get or create the Supabase client.

        Raises:
            StoreError: If credentials are missing or client creation fails
        """
        if self._client is None:
            if not self._url or not self._key:
                raise StoreError(
                    message="Supabase credentials are not configured",
                    code="CLIENT_NOT_CONFIGURED",
                    suggestion="Set SUPABASE_URL and SUPABASE_SERVICE_KEY, or STORE_BACKEND=memory",
                )
            try:
                self._client = create_client(
                    self._url,
                    self._key,
                    options=ClientOptions(postgrest_client_timeout=self._timeout_s),
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise StoreError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file",
                ) from e
        return self._client

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def insert(self, collection: str, document: dict[str, Any]) -> dict[str, Any]:
        client = self.get_client()

        try:
            response = client.table(collection).insert(document).execute()
        except Exception as e:
            raise self._write_error("insert", collection, e) from e

        if not response.data:
            raise StoreError(
                message=f"Insert into {collection} returned no data",
                code="INSERT_NO_DATA",
            )
        return response.data[0]

    def update(
        self,
        collection: str,
        doc_id: str,
        fields: dict[str, Any],
    ) -> dict[str, Any] | None:
        if not fields:
            return self.get(collection, doc_id)

        client = self.get_client()

        try:
            response = (
                client.table(collection)
                .update(fields)
                .eq("id", doc_id)
                .execute()
            )
        except Exception as e:
            if _error_code(e) == INVALID_TEXT_REPRESENTATION:
                return None
            raise self._write_error("update", collection, e) from e

        return response.data[0] if response.data else None

    def delete(self, collection: str, doc_id: str) -> bool:
        client = self.get_client()

        try:
            response = client.table(collection).delete().eq("id", doc_id).execute()
        except Exception as e:
            if _error_code(e) == INVALID_TEXT_REPRESENTATION:
                return False
            raise self._write_error("delete", collection, e) from e

        return bool(response.data)

    def delete_many(self, collection: str, filters: dict[str, Any]) -> int:
        client = self.get_client()

        query = client.table(collection).delete()
        for key, value in filters.items():
            query = query.eq(key, value)

        try:
            response = query.execute()
        except Exception as e:
            if _error_code(e) == INVALID_TEXT_REPRESENTATION:
                return 0
            raise self._write_error("delete_many", collection, e) from e

        deleted = len(response.data or [])
        logger.debug(f"Deleted {deleted} rows from {collection} matching {filters}")
        return deleted

    def _write_error(self, operation: str, collection: str, exc: Exception) -> StoreError:
        if _error_code(exc) == UNIQUE_VIOLATION:
            return StoreError(
                message=f"Unique constraint violated on {collection}: {exc}",
                code=DUPLICATE_KEY,
                details={"collection": collection},
            )
        return StoreError(
            message=f"Failed to {operation} {collection}: {exc}",
            code=f"{operation.upper()}_FAILED",
            suggestion=f"Check that the {collection} table exists and is accessible",
            details={"collection": collection},
        )

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        client = self.get_client()

        try:
            response = (
                client.table(collection)
                .select("*")
                .eq("id", doc_id)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if _error_code(e) in (NO_ROWS, INVALID_TEXT_REPRESENTATION):
                return None
            raise StoreError(
                message=f"Failed to fetch {collection} record: {e}",
                code="FETCH_FAILED",
                details={"collection": collection, "id": doc_id},
            ) from e

    def find(
        self,
        collection: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
    ) -> list[dict[str, Any]]:
        client = self.get_client()

        query = client.table(collection).select("*")
        for key, value in (filters or {}).items():
            query = query.eq(key, value)
        if order_by:
            query = query.order(order_by)

        try:
            response = query.execute()
        except Exception as e:
            raise StoreError(
                message=f"Failed to list {collection}: {e}",
                code="LIST_FAILED",
                details={"collection": collection, "filters": filters or {}},
            ) from e

        return response.data or []

    def find_by_ids(self, collection: str, ids: Iterable[str]) -> list[dict[str, Any]]:
        wanted = sorted(set(ids))
        if not wanted:
            return []

        client = self.get_client()

        try:
            response = (
                client.table(collection)
                .select("*")
                .in_("id", wanted)
                .execute()
            )
        except Exception as e:
            if _error_code(e) == INVALID_TEXT_REPRESENTATION:
                # A malformed id fails the whole IN list; look ids up one by one
                found = (self.get(collection, doc_id) for doc_id in wanted)
                return [doc for doc in found if doc is not None]
            raise StoreError(
                message=f"Failed to fetch {collection} records: {e}",
                code="FETCH_MANY_FAILED",
                details={"collection": collection, "count": len(wanted)},
            ) from e

        return response.data or []

    def ping(self) -> None:
        client = self.get_client()
        try:
            client.table(self._ping_table).select("id").limit(1).execute()
        except Exception as e:
            raise StoreError(
                message=f"Supabase is unreachable: {e}",
                code="PING_FAILED",
            ) from e

    def close(self) -> None:
        self._client = None
