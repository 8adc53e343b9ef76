# =============================================================================
# app/routers/authors.py - Author CRUD Endpoints
# =============================================================================
# GET    /authors       -> 200 [{id, firstName, lastName, userName}]
# POST   /authors       -> 201 {_id, name, userName}
# PUT    /authors/{id}  -> 200 {id, name, userName}
# DELETE /authors/{id}  -> 204 (deletes the author's blog posts first)
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Response, status

from app.dependencies import AuthorServiceDep
from core.services.serializer import serialize_author, serialize_author_summary

router = APIRouter()

AuthorId = Annotated[str, Path(description="Author id")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("")
def list_authors(service: AuthorServiceDep):
    """List every author."""
    return [serialize_author(author) for author in service.list_authors()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_author(
    service: AuthorServiceDep,
    payload: Annotated[
        dict[str, Any],
        Body(examples=[{"firstName": "Ada", "lastName": "Lovelace", "userName": "ada"}]),
    ],
):
    """
    Create an author.

    firstName, lastName and userName are required; userName must be unused.
    """
    author = service.create_author(payload)
    return serialize_author_summary(author, id_key="_id")


@router.put("/{author_id}")
def update_author(
    author_id: AuthorId,
    service: AuthorServiceDep,
    payload: Annotated[dict[str, Any], Body()],
):
    """
    Update an author.

    The body must repeat the path id as `id`. Only the name fields sent
    are changed.
    """
    author = service.update_author(author_id, payload)
    return serialize_author_summary(author)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(author_id: AuthorId, service: AuthorServiceDep):
    """Delete an author together with all of its blog posts."""
    service.delete_author(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
