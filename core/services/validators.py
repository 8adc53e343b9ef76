# =============================================================================
# core/services/validators.py - Write Request Validators
# =============================================================================
# Checks run before any mutating store call. None of them write anything.
# =============================================================================

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from app.exceptions import DuplicateUsernameError, IdMismatchError, MissingFieldError
from lib.utils import normalize_id

if TYPE_CHECKING:
    from core.database import BlogRepository

# Declared order decides which missing field gets reported first
AUTHOR_REQUIRED_FIELDS = ("firstName", "lastName", "userName")
BLOGPOST_REQUIRED_FIELDS = ("title", "content", "author_id")


def validate_required_fields(payload: dict[str, Any], required: Sequence[str]) -> None:
    """
    Check that every required key is present in the request body.

    Presence only: an empty string counts as present.

    Raises:
        MissingFieldError: Naming the first absent field, in `required` order
    """
    for field in required:
        if field not in payload:
            raise MissingFieldError(field)


def validate_unique_user_name(
    repository: "BlogRepository",
    user_name: str,
    exclude_author_id: str | None = None,
) -> None:
    """
    Check that no other author already uses `user_name`.

    Args:
        exclude_author_id: The author being updated, which may keep its own name

    Raises:
        DuplicateUsernameError: If another author holds the name
    """
    existing = repository.find_author_by_user_name(user_name)
    if existing is not None and existing.id != exclude_author_id:
        raise DuplicateUsernameError(user_name)


def validate_matching_ids(path_id: str | None, payload: dict[str, Any]) -> str:
    """
    Check that an update's path id and body `id` are present and equal.

    Returns:
        The normalized id

    Raises:
        IdMismatchError: If either is missing or they differ
    """
    body_id = payload.get("id")
    normalized = normalize_id(path_id)
    if not (normalized and isinstance(body_id, str) and normalize_id(body_id) == normalized):
        raise IdMismatchError(path_id, body_id)
    return normalized

