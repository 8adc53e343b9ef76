# =============================================================================
# app/routers/blogposts.py - Blog Post CRUD Endpoints
# =============================================================================
# GET    /blogposts       -> 200 [{id, author, content, title, created, comments}]
# GET    /blogposts/{id}  -> 200 {id, author, content, title, created, comments}
# POST   /blogposts       -> 201 {id, author, content, title, comments}
# PUT    /blogposts/{id}  -> 204
# DELETE /blogposts/{id}  -> 204
#
# `author` is the author's display name, or "" when it can't be resolved.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Response, status

from app.dependencies import BlogPostServiceDep
from core.services.serializer import serialize_blogpost

router = APIRouter()

BlogPostId = Annotated[str, Path(description="Blog post id")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("")
def list_blogposts(service: BlogPostServiceDep):
    """List every blog post with its author resolved."""
    return [serialize_blogpost(post, post.author) for post in service.list_blogposts()]


@router.get("/{post_id}")
def get_blogpost(post_id: BlogPostId, service: BlogPostServiceDep):
    """Get one blog post. 404 if it doesn't exist."""
    post = service.get_blogpost(post_id)
    return serialize_blogpost(post, post.author)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_blogpost(
    service: BlogPostServiceDep,
    payload: Annotated[
        dict[str, Any],
        Body(examples=[{"title": "T", "content": "C", "author_id": "550e8400-..."}]),
    ],
):
    """
    Create a blog post.

    title, content and author_id are required; author_id must name an
    existing author.
    """
    post = service.create_blogpost(payload)
    return serialize_blogpost(post, post.author, include_created=False)


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_blogpost(
    post_id: BlogPostId,
    service: BlogPostServiceDep,
    payload: Annotated[dict[str, Any], Body()],
):
    """
    Update a blog post's title and/or content.

    The body must repeat the path id as `id`.
    """
    service.update_blogpost(post_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blogpost(post_id: BlogPostId, service: BlogPostServiceDep):
    service.delete_blogpost(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
