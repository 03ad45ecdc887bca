"""PostgreSQL implementation of User repository."""

from typing import Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.domain.error import StoreError
from newsroom.domain.model import User
from newsroom.domain.repository import UserRepository
from newsroom.domain.value import UserId
from newsroom.persistence.mappers import row_to_user
from newsroom.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find several users with a single IN query."""
        ids = list(user_ids)
        if not ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(ids))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"User store failure: {e}") from e
        return [row_to_user(row._asdict()) for row in result.fetchall()]
