"""Get article comments use case."""

from uuid import UUID

from pydantic import BaseModel

from newsroom.application.usecase.base import BaseUseCase
from newsroom.domain.service import CommentService, UserService
from newsroom.domain.value import ArticleId

from .items import CommentItem


class GetArticleCommentsRequest(BaseModel):
    """Get article comments request."""

    article_id: str  # UUID string


class GetArticleCommentsResponse(BaseModel):
    """Get article comments response."""

    article_id: str
    comments: list[CommentItem]
    total: int


class GetArticleCommentsUseCase(BaseUseCase):
    """Use case for listing the top-level comments of an article."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize get article comments use case.

        Args:
            comment_service: Comment domain service
            user_service: User service for author names
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(
        self, request: GetArticleCommentsRequest
    ) -> GetArticleCommentsResponse:
        """Execute get article comments flow.

        Steps:
        1. Fetch top-level comments (newest first) via comment service
        2. Resolve author names in one batch
        3. Convert to response items

        Args:
            request: Request with the article ID

        Returns:
            Top-level comments enriched with author names
        """
        article_id = ArticleId(UUID(request.article_id))

        comments = await self.comment_service.list_top_level(article_id)
        names = await self.user_service.get_display_names(
            comment.author_id for comment in comments
        )

        items = [
            CommentItem.from_domain(comment, names.get(comment.author_id))
            for comment in comments
        ]

        return GetArticleCommentsResponse(
            article_id=request.article_id,
            comments=items,
            total=len(items),
        )
