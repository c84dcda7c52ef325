"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from stories.domain.model import Comment, Like, Testimonial, User
from stories.domain.value import (
    CommentId,
    LikeableType,
    LikeId,
    TestimonialId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column value (asyncpg returns UUID, tests may use str)."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        avatar_url=row.get("avatar_url"),
        promotion=row.get("promotion"),
        verified=row["verified"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_testimonial(row: Dict[str, Any]) -> Testimonial:
    """Convert database row to Testimonial domain model.

    Args:
        row: Database row as dict

    Returns:
        Testimonial domain model
    """
    return Testimonial(
        id=TestimonialId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        likes_count=row["likes_count"],
        comments_count=row["comments_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def testimonial_to_dict(testimonial: Testimonial) -> Dict[str, Any]:
    """Convert Testimonial domain model to database dict."""
    return testimonial.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        testimonial_id=TestimonialId(_uuid(row["testimonial_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        likes_count=row["likes_count"],
        replies_count=row["replies_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model.

    Args:
        row: Database row as dict

    Returns:
        Like domain model
    """
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        likeable_type=LikeableType(row["likeable_type"]),
        likeable_id=_uuid(row["likeable_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict.

    The likeable type is stored by its enum value.
    """
    like_dict = like.model_dump()
    like_dict["likeable_type"] = like.likeable_type.value
    return like_dict
