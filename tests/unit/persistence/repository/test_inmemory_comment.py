"""Unit tests for the in-memory comment repository."""

from uuid import uuid4

import pytest

from newsroom.domain.value import ArticleId, CommentId
from newsroom.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment, minutes_ago


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_find_children_oldest_first(self):
        """Direct replies come back in creation order."""
        # Arrange
        repo = InMemoryCommentRepository()
        article_id = ArticleId(uuid4())
        parent = make_comment(article_id, created_at=minutes_ago(10))
        second = make_comment(article_id, parent_id=parent.id, created_at=minutes_ago(2))
        first = make_comment(article_id, parent_id=parent.id, created_at=minutes_ago(8))
        grandchild = make_comment(
            article_id, parent_id=first.id, created_at=minutes_ago(1)
        )
        for comment in (parent, second, first, grandchild):
            await repo.save(comment)

        # Act
        children = await repo.find_children(parent.id)

        # Assert
        assert [c.id for c in children] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_add_and_remove_reply(self):
        """The replies cache is appended to and removed from by id."""
        # Arrange
        repo = InMemoryCommentRepository()
        parent = make_comment(ArticleId(uuid4()))
        await repo.save(parent)
        first, second = CommentId(uuid4()), CommentId(uuid4())

        # Act
        await repo.add_reply(parent.id, first)
        await repo.add_reply(parent.id, second)
        await repo.remove_reply(parent.id, first)

        # Assert
        assert (await repo.find_by_id(parent.id)).reply_ids == [second]

    @pytest.mark.asyncio
    async def test_reply_cache_on_missing_parent_is_ignored(self):
        """Cache updates for a missing parent are no-ops."""
        # Arrange
        repo = InMemoryCommentRepository()

        missing_id = CommentId(uuid4())

        # Act
        await repo.add_reply(missing_id, CommentId(uuid4()))
        await repo.remove_reply(missing_id, CommentId(uuid4()))

        # Assert
        assert await repo.find_by_id(missing_id) is None

    @pytest.mark.asyncio
    async def test_delete_reports_whether_removed(self):
        """Delete returns False once the comment is gone."""
        # Arrange
        repo = InMemoryCommentRepository()
        comment = make_comment(ArticleId(uuid4()))
        await repo.save(comment)

        # Act & Assert
        assert await repo.delete(comment.id) is True
        assert await repo.delete(comment.id) is False

    @pytest.mark.asyncio
    async def test_update_content_missing(self):
        """Updating a missing comment returns None."""
        # Arrange
        repo = InMemoryCommentRepository()

        # Act
        result = await repo.update_content(CommentId(uuid4()), "Text")

        # Assert
        assert result is None
