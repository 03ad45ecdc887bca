"""PostgreSQL repository implementations."""

from newsroom.persistence.repository.comment import PostgresCommentRepository
from newsroom.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresUserRepository",
]
