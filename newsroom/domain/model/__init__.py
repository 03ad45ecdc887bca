"""Domain model entities for Newsroom."""

from newsroom.domain.model.comment import Comment
from newsroom.domain.model.user import User

__all__ = [
    "Comment",
    "User",
]
