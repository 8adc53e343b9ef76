# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4


# =============================================================================
# ID Utilities
# =============================================================================

def normalize_id(value: str | UUID | None) -> str | None:
    """
    Normalize a record id to string format.

    Handles both string and UUID objects, ensuring consistent string output.
    Surrounding whitespace is stripped; empty strings become None.

    Args:
        value: Record id as string, UUID object or None

    Returns:
        String representation of the id, or None

    Example:
        author_id = normalize_id(uuid_obj)  # "550e8400-..."
        author_id = normalize_id(" 550e8400-... ")  # "550e8400-..."
    """
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def new_id() -> str:
    """Generate a fresh opaque record id."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error for failures raised below the HTTP layer.

    The store backends raise subclasses of this; the service layer turns
    them into API exceptions (see core/services/errors.py).

    Attributes:
        code: Machine-readable error code, e.g. "DUPLICATE_KEY"
        message: Human-readable error message
        suggestion: What an operator can do about it
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        if self.suggestion:
            return f"[{self.code}] {self.message} ({self.suggestion})"
        return f"[{self.code}] {self.message}"
