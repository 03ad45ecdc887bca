"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from newsroom.domain.model import Comment, User
from newsroom.domain.repository import CommentRepository
from newsroom.domain.value import ArticleId, CommentId, DisplayName, UserId


def make_user(name: str = "Test User") -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), name=DisplayName(name))


def make_comment(
    article_id: ArticleId,
    author_id: UserId | None = None,
    content: str = "A comment",
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
    comment_id: CommentId | None = None,
) -> Comment:
    """Build a comment without going through the service.

    Useful for arranging trees with explicit timestamps or for storing
    data the service would refuse to create.
    """
    created_at = created_at or datetime.now()
    return Comment(
        id=comment_id or CommentId(uuid4()),
        article_id=article_id,
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_id=parent_id,
        created_at=created_at,
        updated_at=created_at,
    )


def minutes_ago(minutes: int) -> datetime:
    """Timestamp ``minutes`` minutes in the past."""
    return datetime.now() - timedelta(minutes=minutes)


async def count_article_comments(
    repo: CommentRepository, article_id: ArticleId
) -> int:
    """Count an article's comments by walking down from its top-level ones."""
    pending = await repo.find_top_level(article_id)
    count = 0
    while pending:
        comment = pending.pop()
        count += 1
        pending.extend(await repo.find_children(comment.id))
    return count
