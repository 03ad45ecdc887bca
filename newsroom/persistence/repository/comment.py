"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.domain.error import StoreError
from newsroom.domain.model import Comment
from newsroom.domain.repository import CommentRepository
from newsroom.domain.value import ArticleId, CommentId
from newsroom.persistence.mappers import comment_to_dict, row_to_comment
from newsroom.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every SQLAlchemy failure is re-raised as ``StoreError``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Any) -> Any:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"Comment store failure: {e}") from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Comment store failure: {e}") from e

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(self, article_id: ArticleId) -> List[Comment]:
        """Find top-level comments of an article, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies of a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self._execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self._execute(stmt)
        await self._flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )

        result = await self._execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self._flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount > 0

    async def add_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Append to the replies cache in a single UPDATE."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == parent_id)
            .values(reply_ids=func.array_append(comments_table.c.reply_ids, reply_id))
        )
        await self._execute(stmt)
        await self._flush()

    async def remove_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Remove from the replies cache in a single UPDATE.

        Runs inside a SAVEPOINT so a failure leaves the surrounding
        transaction usable.
        """
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == parent_id)
            .values(reply_ids=func.array_remove(comments_table.c.reply_ids, reply_id))
        )
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"Comment store failure: {e}") from e
