"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable

from microblog.domain.model import NewPost, NewUser, Post, User
from microblog.domain.value import ExternalProof, Handle, PostId, TagName, UserId


def _aware(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops the offset)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        handle=Handle(row["handle"]) if row.get("handle") is not None else None,
        external_proof=(
            ExternalProof(row["external_proof"])
            if row.get("external_proof") is not None
            else None
        ),
        email=row.get("email"),
        avatar_ref=row.get("avatar_ref"),
        member_since=_aware(row["member_since"]),
    )


def new_user_to_dict(user: NewUser) -> Dict[str, Any]:
    """Convert NewUser domain model to database dict.

    Args:
        user: NewUser domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "handle": user.handle.root if user.handle else None,
        "external_proof": user.external_proof.root if user.external_proof else None,
        "email": user.email,
        "avatar_ref": user.avatar_ref,
        "member_since": user.member_since,
    }


def row_to_post(row: Dict[str, Any], tag_names: Iterable[str] = ()) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tag_names: Tags attached to the post

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        body=row["body"],
        author_handle=Handle(row["author_handle"]),
        tags=frozenset(TagName(name) for name in tag_names),
        created_at=_aware(row["created_at"]),
        like_count=row["like_count"],
    )


def new_post_to_dict(post: NewPost) -> Dict[str, Any]:
    """Convert NewPost domain model to database dict.

    Tags are excluded; they live in ``post_tags``.

    Args:
        post: NewPost domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "title": post.title,
        "body": post.body,
        "author_handle": post.author_handle.root,
        "created_at": post.created_at,
        "like_count": 0,
    }
