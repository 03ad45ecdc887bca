"""Application layer DI providers."""

from dishka import Scope, provide

from newsroom.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetArticleCommentsUseCase,
    GetCommentThreadUseCase,
    UpdateCommentUseCase,
)
from newsroom.domain.service import CommentService, UserService
from newsroom.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_article_comments_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> GetArticleCommentsUseCase:
        """Provide get article comments use case."""
        return GetArticleCommentsUseCase(
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_thread_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)
