"""Domain value objects for Newsroom."""

from newsroom.domain.value.identifiers import ArticleId, CommentId, UserId
from newsroom.domain.value.types import DisplayName

__all__ = [
    # Identifiers
    "ArticleId",
    "CommentId",
    "UserId",
    # Types
    "DisplayName",
]
