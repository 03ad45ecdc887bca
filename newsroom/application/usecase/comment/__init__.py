"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_article_comments import (
    GetArticleCommentsRequest,
    GetArticleCommentsResponse,
    GetArticleCommentsUseCase,
)
from .get_comment_thread import GetCommentThreadRequest, GetCommentThreadUseCase
from .items import CommentItem, CommentThreadItem
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CommentThreadItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetArticleCommentsRequest",
    "GetArticleCommentsResponse",
    "GetArticleCommentsUseCase",
    "GetCommentThreadRequest",
    "GetCommentThreadUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
