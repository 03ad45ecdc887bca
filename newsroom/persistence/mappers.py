"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from newsroom.domain.model import Comment, User
from newsroom.domain.value import ArticleId, CommentId, DisplayName, UserId


def _as_uuid(value: Any) -> UUID:
    """Accept both UUID objects and their string form."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        name=DisplayName(row["name"]),
        email=row.get("email"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        article_id=ArticleId(_as_uuid(row["article_id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_as_uuid(row["parent_id"]))
        if row.get("parent_id")
        else None,
        reply_ids=[CommentId(_as_uuid(r)) for r in row.get("reply_ids") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()
