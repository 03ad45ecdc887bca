"""In-memory comment repository for testing and local runs."""

from datetime import datetime
from typing import Optional

from newsroom.domain.model.comment import Comment
from newsroom.domain.repository.comment import CommentRepository
from newsroom.domain.value import ArticleId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository.

    Not transactional: a failure part-way through a cascading delete leaves
    the comments removed so far deleted.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(self, article_id: ArticleId) -> list[Comment]:
        """Find top-level comments of an article, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.article_id == article_id and c.parent_id is None
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies of a comment, oldest first."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def add_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Append a reply id to the parent's cache."""
        parent = self._comments.get(parent_id)
        if parent:
            self._comments[parent_id] = parent.model_copy(
                update={"reply_ids": [*parent.reply_ids, reply_id]}
            )

    async def remove_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Remove a reply id from the parent's cache."""
        parent = self._comments.get(parent_id)
        if parent:
            self._comments[parent_id] = parent.model_copy(
                update={"reply_ids": [r for r in parent.reply_ids if r != reply_id]}
            )
