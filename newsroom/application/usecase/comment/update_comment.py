"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from newsroom.application.usecase.base import BaseUseCase
from newsroom.domain.service import CommentService, UserService
from newsroom.domain.value import CommentId, UserId

from .items import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str  # New content (required, cannot be empty)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            user_service: User service for the author name
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID and content

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If user doesn't own the comment
            ValidationError: If content is empty
        """
        user_id = UserId(UUID(request.user_id))

        updated = await self.comment_service.update_content(
            comment_id=CommentId(UUID(request.comment_id)),
            author_id=user_id,
            content=request.content,
        )

        names = await self.user_service.get_display_names([updated.author_id])
        return CommentItem.from_domain(updated, names.get(updated.author_id))
