# =============================================================================
# core/models/author.py - Author Schemas
# =============================================================================
# These models define the author record and its write payloads:
# - Author: A stored author, parsed from a document
# - AuthorCreate: Body of POST /authors
# - AuthorUpdate: Body of PUT /authors/{id} (partial merge)
#
# Wire names are camelCase (firstName, userName); documents use snake_case.
# userName is unique across all authors.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Author(BaseModel):
    """
    A stored author.

    Example document:
        {
            "id": "550e8400-...",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "user_name": "ada"
        }
    """

    id: str = Field(..., min_length=1, description="Opaque unique id")

    # Names may be missing on legacy documents; display code treats None as ""
    first_name: str | None = Field(default=None, description="Given name")
    last_name: str | None = Field(default=None, description="Family name")

    user_name: str | None = Field(default=None, description="Globally unique handle")

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Author":
        """Create an Author from a store document."""
        return cls(
            id=str(document["id"]),
            first_name=document.get("first_name"),
            last_name=document.get("last_name"),
            user_name=document.get("user_name"),
        )


class AuthorCreate(BaseModel):
    """
    Schema for creating an author.

    Example:
        {"firstName": "Ada", "lastName": "Lovelace", "userName": "ada"}
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    user_name: str = Field(..., alias="userName")

    def to_document(self) -> dict[str, Any]:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "user_name": self.user_name,
        }


class AuthorUpdate(BaseModel):
    """
    Schema for updating an author.

    Only the fields present in the body are written; `id` must equal the
    path id and is never written. Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    user_name: str | None = Field(default=None, alias="userName")

    @field_validator("first_name", "last_name", "user_name")
    @classmethod
    def reject_null(cls, value: str | None) -> str:
        # Omit a field to keep it; null would erase it
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def to_fields(self) -> dict[str, Any]:
        """Document fields to merge, limited to what the client sent."""
        return self.model_dump(exclude_unset=True)
