# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response carries a human-readable `detail`, a machine-readable
# `code`, and where possible a `suggestion` telling the client how to fix it.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BlogApiException(Exception):
    """
    Base exception for the blog API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "BLOG_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class MissingFieldError(BlogApiException):
    """Raised when a required field is absent from a write request."""

    def __init__(self, field: str):
        super().__init__(
            message=f"Missing `{field}` in request body",
            code="MISSING_FIELD",
            status_code=400,
            suggestion=f"Include `{field}` in the JSON body",
            details={"field": field}
        )
        self.field = field


class IdMismatchError(BlogApiException):
    """Raised when the path id and the body id of an update disagree."""

    def __init__(self, path_id: str | None, body_id: Any):
        super().__init__(
            message=(
                f"Request path id ({path_id}) and request body id "
                f"({body_id}) must match"
            ),
            code="ID_MISMATCH",
            status_code=400,
            suggestion="Send the record id in the body as `id`, identical to the URL id",
            details={"path_id": path_id, "body_id": body_id}
        )


# =============================================================================
# Author Exceptions
# =============================================================================

class DuplicateUsernameError(BlogApiException):
    """Raised when a userName is already taken by another author."""

    def __init__(self, user_name: str):
        super().__init__(
            message="Username is already in use",
            code="DUPLICATE_USERNAME",
            status_code=400,
            suggestion="Pick a different userName",
            details={"userName": user_name}
        )


class AuthorNotFoundError(BlogApiException):
    """Raised when a write references an author that does not exist."""

    def __init__(self, author_id: str | None):
        super().__init__(
            message=f"Author not found: {author_id}",
            code="AUTHOR_NOT_FOUND",
            status_code=400,
            suggestion="Create the author first (POST /authors) and use its id as author_id",
            details={"author_id": author_id}
        )


# =============================================================================
# Record / Storage Exceptions
# =============================================================================

class RecordNotFoundError(BlogApiException):
    """Raised when a requested record id doesn't exist."""

    def __init__(self, kind: str, record_id: str | None):
        super().__init__(
            message=f"{kind} not found: {record_id}",
            code="RECORD_NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {kind.lower()} id is correct",
            details={"id": record_id}
        )


class StorageFault(BlogApiException):
    """Raised when the document store fails or is unreachable."""

    def __init__(self, error: str, operation: str | None = None):
        details = {"error": error}
        if operation:
            details["operation"] = operation
        super().__init__(
            message=f"Internal server error - {operation or 'storage'}",
            code="STORAGE_FAULT",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details=details
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def blog_api_exception_handler(
    request: Request,
    exc: BlogApiException
) -> JSONResponse:
    """
    Convert BlogApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code} {exc.details}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Raised for bodies that are not JSON objects or carry wrongly-typed values.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
