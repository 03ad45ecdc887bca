"""Get comment thread use case."""

from uuid import UUID

from pydantic import BaseModel

from newsroom.application.usecase.base import BaseUseCase
from newsroom.domain.service import CommentService, UserService
from newsroom.domain.value import CommentId

from .items import CommentThreadItem


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    comment_id: str  # UUID string


class GetCommentThreadUseCase(BaseUseCase):
    """Use case for loading a comment with all of its nested replies."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author names
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentThreadRequest) -> CommentThreadItem:
        """Execute get comment thread flow.

        Args:
            request: Request with the root comment ID

        Returns:
            Root comment with replies nested at every level

        Raises:
            NotFoundError: If the comment does not exist
            DataIntegrityError: If the stored replies form a cycle
        """
        comment_id = CommentId(UUID(request.comment_id))

        tree = await self.comment_service.expand_with_replies(comment_id)
        nodes = tree.walk()
        names = await self.user_service.get_display_names(
            node.comment.author_id for node in nodes
        )

        return CommentThreadItem.from_tree(tree, names)
