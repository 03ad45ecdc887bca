"""Domain services."""

from .base import Service
from .comment_service import CommentService, CommentTreeNode
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "CommentService",
    "CommentTreeNode",
    "JWTService",
    "Service",
    "UserService",
]
