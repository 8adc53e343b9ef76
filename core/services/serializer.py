# =============================================================================
# core/services/serializer.py - Wire Representations
# =============================================================================
# Converts Author / BlogPost records into the JSON shapes clients receive.
#
#   author     -> {id, firstName, lastName, userName}
#   blog post  -> {id, author, content, title, created, comments}
#
# A post's `author` is the display name of its resolved author, or "" when
# resolution found no author.
# =============================================================================

from typing import Any

from core.models import Author, BlogPost


def display_name(author: Author) -> str:
    """'<first> <last>' with surrounding whitespace trimmed."""
    return f"{author.first_name or ''} {author.last_name or ''}".strip()


def serialize_author(author: Author) -> dict[str, Any]:
    return {
        "id": author.id,
        "firstName": author.first_name,
        "lastName": author.last_name,
        "userName": author.user_name,
    }


def serialize_author_summary(author: Author, id_key: str = "id") -> dict[str, Any]:
    """
    Short form returned by author writes.

    POST /authors answers with `_id`, PUT /authors/{id} with `id`.
    """
    return {
        id_key: author.id,
        "name": display_name(author),
        "userName": author.user_name,
    }


def serialize_comments(post: BlogPost) -> list[str]:
    return [comment.content for comment in post.comments]


def serialize_blogpost(
    post: BlogPost,
    resolved_author: Author | None,
    include_created: bool = True,
) -> dict[str, Any]:
    """
    Serialize a blog post.

    Args:
        post: The post record
        resolved_author: Result of author resolution; None means no author
        include_created: False for the create response, which omits it

    Returns:
        Dict ready to be returned as JSON
    """
    result: dict[str, Any] = {
        "id": post.id,
        "author": display_name(resolved_author) if resolved_author is not None else "",
        "content": post.content,
        "title": post.title,
    }
    if include_created:
        result["created"] = post.created.isoformat()
    result["comments"] = serialize_comments(post)
    return result
