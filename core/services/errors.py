# =============================================================================
# core/services/errors.py - Store Error Translation
# =============================================================================
# Services wrap store calls in `store_operation(...)` so a StoreError leaves
# the service layer as StorageFault (HTTP 500). Not-found never reaches
# here: stores report it as None.
# =============================================================================

import logging
from contextlib import contextmanager
from typing import Iterator

from app.exceptions import StorageFault
from lib.document_store import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(operation: str) -> Iterator[None]:
    """
    Translate StoreError raised inside the block into StorageFault.

    Example:
        with store_operation("adding author"):
            author = repository.create_author(payload)
    """
    try:
        yield
    except StoreError as e:
        logger.error(f"Store failure while {operation}: {e}")
        raise StorageFault(error=e.message, operation=operation) from e
