"""Repository interfaces for Newsroom domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from newsroom.domain.repository.comment import CommentRepository
from newsroom.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "UserRepository",
]
