"""Unit tests for CreateCommentUseCase."""

from uuid import UUID, uuid4

import pytest

from newsroom.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from newsroom.domain.error import NotFoundError, ValidationError
from newsroom.domain.repository import CommentRepository, UserRepository
from newsroom.domain.service import CommentService, UserService
from newsroom.domain.value import CommentId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _use_case(unit_env) -> CreateCommentUseCase:
    return CreateCommentUseCase(
        comment_service=await unit_env.get(CommentService),
        user_service=await unit_env.get(UserService),
    )


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_includes_author_name(self, unit_env):
        """The created comment carries the author's display name."""
        # Arrange
        use_case = await _use_case(unit_env)
        user_repo = await unit_env.get(UserRepository)
        author = make_user("Grace Hopper")
        await user_repo.save(author)
        article_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                article_id=article_id,
                content="Great piece",
                author_id=str(author.id),
            )
        )

        # Assert
        assert response.author_name == "Grace Hopper"
        assert response.author_id == str(author.id)
        assert response.article_id == article_id
        assert response.parent_id is None
        assert response.reply_ids == []

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Replies reference their parent and update its cache."""
        # Arrange
        use_case = await _use_case(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        article_id = str(uuid4())
        parent = await use_case.execute(
            CreateCommentRequest(
                article_id=article_id, content="Parent", author_id=str(uuid4())
            )
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                article_id=article_id,
                content="Reply",
                author_id=str(uuid4()),
                parent_id=parent.comment_id,
            )
        )

        # Assert
        assert reply.parent_id == parent.comment_id
        assert reply.author_name is None
        stored_parent = await comment_repo.find_by_id(
            CommentId(UUID(parent.comment_id))
        )
        assert [str(r) for r in stored_parent.reply_ids] == [reply.comment_id]

    @pytest.mark.asyncio
    async def test_create_reply_to_missing_parent(self, unit_env):
        """Replying to an unknown comment raises NotFoundError."""
        # Arrange
        use_case = await _use_case(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=str(uuid4()),
                    content="Reply",
                    author_id=str(uuid4()),
                    parent_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_create_empty_comment(self, unit_env):
        """Empty content raises ValidationError."""
        # Arrange
        use_case = await _use_case(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=str(uuid4()), content="", author_id=str(uuid4())
                )
            )
