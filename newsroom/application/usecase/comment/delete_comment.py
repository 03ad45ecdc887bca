"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from newsroom.application.usecase.base import BaseUseCase
from newsroom.domain.service import CommentService
from newsroom.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str
    deleted_count: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and all of its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Confirmation with the number of comments removed

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If user doesn't own the comment
        """
        deleted = await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            author_id=UserId(UUID(request.user_id)),
        )

        return DeleteCommentResponse(
            message="Comment and all nested replies removed",
            deleted_count=deleted,
        )
