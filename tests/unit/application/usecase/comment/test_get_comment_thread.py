"""Unit tests for GetCommentThreadUseCase."""

from uuid import uuid4

import pytest

from newsroom.application.usecase.comment import (
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
)
from newsroom.domain.error import NotFoundError
from newsroom.domain.repository import CommentRepository, UserRepository
from newsroom.domain.service import CommentService, UserService
from newsroom.domain.value import ArticleId
from tests.conftest import make_comment, make_user, minutes_ago
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentThreadUseCase:
    """Tests for GetCommentThreadUseCase."""

    @pytest.mark.asyncio
    async def test_thread_is_nested_and_named(self, unit_env):
        """Every level of the thread carries its replies and author names."""
        # Arrange
        use_case = GetCommentThreadUseCase(
            comment_service=await unit_env.get(CommentService),
            user_service=await unit_env.get(UserService),
        )
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        alice = make_user("Alice")
        bob = make_user("Bob")
        await user_repo.save(alice)
        await user_repo.save(bob)
        article_id = ArticleId(uuid4())
        c1 = make_comment(article_id, author_id=alice.id, created_at=minutes_ago(30))
        c2 = make_comment(
            article_id, author_id=bob.id, parent_id=c1.id, created_at=minutes_ago(20)
        )
        c3 = make_comment(
            article_id, author_id=alice.id, parent_id=c2.id, created_at=minutes_ago(10)
        )
        for comment in (c1, c2, c3):
            await comment_repo.save(comment)

        # Act
        thread = await use_case.execute(GetCommentThreadRequest(comment_id=str(c1.id)))

        # Assert
        assert thread.comment_id == str(c1.id)
        assert thread.author_name == "Alice"
        assert len(thread.replies) == 1
        reply = thread.replies[0]
        assert reply.comment_id == str(c2.id)
        assert reply.parent_id == str(c1.id)
        assert reply.author_name == "Bob"
        assert [r.comment_id for r in reply.replies] == [str(c3.id)]
        assert reply.replies[0].author_name == "Alice"
        assert reply.replies[0].replies == []

    @pytest.mark.asyncio
    async def test_thread_for_missing_comment(self, unit_env):
        """Unknown comments raise NotFoundError."""
        # Arrange
        use_case = GetCommentThreadUseCase(
            comment_service=await unit_env.get(CommentService),
            user_service=await unit_env.get(UserService),
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentThreadRequest(comment_id=str(uuid4())))
