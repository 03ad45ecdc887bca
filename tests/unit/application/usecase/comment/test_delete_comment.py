"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from newsroom.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from newsroom.domain.error import NotAuthorizedError, NotFoundError
from newsroom.domain.repository import CommentRepository
from newsroom.domain.service import CommentService
from newsroom.domain.value import ArticleId, UserId
from tests.conftest import count_article_comments
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_reports_count(self, unit_env):
        """The response reports how many comments were removed."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = DeleteCommentUseCase(comment_service=comment_service)
        author_id = UserId(uuid4())
        article_id = ArticleId(uuid4())
        root = await comment_service.create_comment(author_id, article_id, "Root")
        first = await comment_service.create_comment(
            UserId(uuid4()), article_id, "First", root.id
        )
        await comment_service.create_comment(
            UserId(uuid4()), article_id, "Second", root.id
        )
        await comment_service.create_comment(
            UserId(uuid4()), article_id, "Nested", first.id
        )

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(root.id), user_id=str(author_id))
        )

        # Assert
        assert response.deleted_count == 4
        assert response.message == "Comment and all nested replies removed"
        assert await count_article_comments(comment_repo, article_id) == 0

    @pytest.mark.asyncio
    async def test_delete_by_other_user(self, unit_env):
        """Only the author may delete."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        use_case = DeleteCommentUseCase(comment_service=comment_service)
        comment = await comment_service.create_comment(
            UserId(uuid4()), ArticleId(uuid4()), "Keep me"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_delete_missing_comment(self, unit_env):
        """Unknown comments raise NotFoundError."""
        # Arrange
        use_case = DeleteCommentUseCase(
            comment_service=await unit_env.get(CommentService)
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(uuid4()), user_id=str(uuid4()))
            )
