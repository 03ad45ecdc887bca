"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from newsroom.application.usecase.base import BaseUseCase
from newsroom.domain.service import CommentService, UserService
from newsroom.domain.value import ArticleId, CommentId, UserId

from .items import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for the author name
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        The article itself is not looked up; comments on an unknown article
        are accepted and simply never listed by another article.

        Args:
            request: Create comment request

        Returns:
            Created comment with the author's name

        Raises:
            ValidationError: If content is empty or parent is on another article
            NotFoundError: If the parent comment does not exist
        """
        author_id = UserId(UUID(request.author_id))
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.comment_service.create_comment(
            author_id=author_id,
            article_id=ArticleId(UUID(request.article_id)),
            content=request.content,
            parent_id=parent_id,
        )

        names = await self.user_service.get_display_names([author_id])
        return CommentItem.from_domain(comment, names.get(author_id))
