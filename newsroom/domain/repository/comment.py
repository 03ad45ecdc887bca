"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from newsroom.domain.model.comment import Comment
from newsroom.domain.value import ArticleId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer and raise ``StoreError``
    when the backing store fails.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(self, article_id: ArticleId) -> List[Comment]:
        """Find comments attached directly to an article.

        Args:
            article_id: The article ID

        Returns:
            Comments without a parent, newest first
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment.

        This is the authoritative parent/child lookup; it queries on
        ``parent_id`` rather than reading the parent's ``reply_ids``.

        Args:
            parent_id: The parent comment ID

        Returns:
            Direct replies, oldest first
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Persist a new comment.

        Edits go through ``update_content`` and the replies cache through
        ``add_reply`` / ``remove_reply``.

        Args:
            comment: The comment to insert

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content and refresh its updated_at.

        Only the content columns are written, so a concurrent change to the
        replies cache is never overwritten.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete, no cascade).

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was removed, False if it was already gone
        """
        pass

    @abstractmethod
    async def add_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Atomically append a reply id to the parent's replies cache.

        Args:
            parent_id: The parent comment ID
            reply_id: The new reply's ID
        """
        pass

    @abstractmethod
    async def remove_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Atomically remove a reply id from the parent's replies cache.

        Args:
            parent_id: The parent comment ID
            reply_id: The removed reply's ID
        """
        pass
