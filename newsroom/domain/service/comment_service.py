"""Comment domain service.

Owns the reply tree of an article's comments: listing top-level comments,
expanding a comment into its full reply tree, and cascading deletes.
Every traversal is an explicit loop over an owned stack with one awaited
store call per step, so depth is bounded by memory rather than by the
Python call stack.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import logfire

from newsroom.domain.error import (
    DataIntegrityError,
    NotAuthorizedError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from newsroom.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from newsroom.domain.repository import CommentRepository
from newsroom.domain.value import ArticleId, CommentId, UserId

from .base import Service


@dataclass
class CommentTreeNode:
    """A comment together with its nested replies."""

    comment: Comment
    replies: list["CommentTreeNode"] = field(default_factory=list)

    def walk(self) -> list["CommentTreeNode"]:
        """Return every node of the subtree in pre-order."""
        nodes: list[CommentTreeNode] = []
        pending = [self]
        while pending:
            node = pending.pop()
            nodes.append(node)
            pending.extend(reversed(node.replies))
        return nodes


def _validate_content(content: str | None) -> str:
    """Reject blank or oversized comment content."""
    if content is None or not content.strip():
        raise ValidationError("Comment content cannot be empty")
    if len(content) > MAX_CONTENT_LENGTH:
        raise ValidationError(
            f"Comment content must be at most {MAX_CONTENT_LENGTH} characters"
        )
    return content


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def list_top_level(self, article_id: ArticleId) -> list[Comment]:
        """List the comments attached directly to an article.

        Replies are not included. An unknown article yields an empty list.

        Args:
            article_id: Article ID

        Returns:
            Top-level comments, newest first
        """
        with logfire.span(
            "comment_service.list_top_level", article_id=str(article_id)
        ):
            comments = await self.comment_repository.find_top_level(article_id)
            logfire.info(
                "Top-level comments retrieved",
                article_id=str(article_id),
                count=len(comments),
            )
            return comments

    async def expand_with_replies(self, comment_id: CommentId) -> CommentTreeNode:
        """Build the complete reply tree rooted at a comment.

        Children are looked up by their ``parent_id`` at every level and
        attached oldest first. The whole tree is materialized before
        returning.

        Args:
            comment_id: Root comment ID

        Returns:
            Root node with nested replies

        Raises:
            NotFoundError: If the root comment does not exist
            DataIntegrityError: If a comment is reached twice (reply cycle)
        """
        with logfire.span(
            "comment_service.expand_with_replies", comment_id=str(comment_id)
        ):
            root = await self.get_comment_by_id(comment_id)
            if not root:
                raise NotFoundError("Comment", str(comment_id))

            root_node = CommentTreeNode(comment=root)
            visited: set[CommentId] = {root.id}
            pending = [root_node]

            while pending:
                node = pending.pop()
                children = await self.comment_repository.find_children(
                    node.comment.id
                )
                for child in children:
                    if child.id in visited:
                        logfire.error(
                            "Reply cycle detected",
                            root_id=str(comment_id),
                            comment_id=str(child.id),
                            parent_id=str(node.comment.id),
                        )
                        raise DataIntegrityError(
                            f"Reply cycle detected at comment {child.id}"
                        )
                    visited.add(child.id)
                    child_node = CommentTreeNode(comment=child)
                    node.replies.append(child_node)
                    pending.append(child_node)

            logfire.info(
                "Comment tree expanded",
                comment_id=str(comment_id),
                size=len(visited),
            )
            return root_node

    async def create_comment(
        self,
        author_id: UserId,
        article_id: ArticleId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an article or a reply to another comment.

        Args:
            author_id: Author user ID
            article_id: Article ID
            content: Comment content
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or the parent belongs to
                another article
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = _validate_content(content)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        article_id=str(article_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.article_id != article_id:
                    logfire.warn(
                        "Parent comment does not belong to article",
                        parent_id=str(parent_id),
                        parent_article_id=str(parent.article_id),
                        target_article_id=str(article_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this article"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                reply_ids=[],
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            if parent_id:
                await self.comment_repository.add_reply(parent_id, saved.id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def update_content(
        self, comment_id: CommentId, author_id: UserId, content: str
    ) -> Comment:
        """Replace the content of a comment.

        Only the original author may edit; there is no moderator override.

        Args:
            comment_id: Comment ID
            author_id: ID of the user making the change
            content: New content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If content is empty
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            comment = await self._get_owned_comment(comment_id, author_id)
            content = _validate_content(content)

            updated = await self.comment_repository.update_content(
                comment.id, content
            )
            if updated is None:
                # Removed by a concurrent delete after the ownership check
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                content_length=len(updated.content),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, author_id: UserId) -> int:
        """Delete a comment together with every reply beneath it.

        Descendants are removed depth-first, children before their parent,
        so no remaining comment ever points at a deleted parent. The parent's
        replies cache is updated on a best-effort basis first.

        There is no transaction here: with a transactional store the
        enclosing unit of work decides whether a failure mid-cascade is
        rolled back.

        Args:
            comment_id: Root of the subtree to delete
            author_id: ID of the user requesting the deletion

        Returns:
            Number of comments removed, root included

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            comment = await self._get_owned_comment(comment_id, author_id)

            if comment.parent_id:
                try:
                    await self.comment_repository.remove_reply(
                        comment.parent_id, comment.id
                    )
                except StoreError as e:
                    logfire.warn(
                        "Could not detach comment from parent replies",
                        comment_id=str(comment.id),
                        parent_id=str(comment.parent_id),
                        error=str(e),
                    )

            deleted = 0
            seen: set[CommentId] = set()
            # (comment id, children already scheduled)
            stack: list[tuple[CommentId, bool]] = [(comment.id, False)]

            while stack:
                current_id, expanded = stack.pop()
                if expanded:
                    if await self.comment_repository.delete(current_id):
                        deleted += 1
                    continue

                if current_id in seen:
                    logfire.error(
                        "Reply cycle detected during delete",
                        root_id=str(comment_id),
                        comment_id=str(current_id),
                    )
                    continue
                seen.add(current_id)

                stack.append((current_id, True))
                children = await self.comment_repository.find_children(current_id)
                for child in reversed(children):
                    stack.append((child.id, False))

            logfire.info(
                "Comment subtree deleted",
                comment_id=str(comment_id),
                deleted=deleted,
            )
            return deleted

    async def _get_owned_comment(
        self, comment_id: CommentId, author_id: UserId
    ) -> Comment:
        """Load a comment and check that ``author_id`` owns it."""
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))

        if comment.author_id != author_id:
            logfire.warn(
                "Comment ownership check failed",
                comment_id=str(comment_id),
                author_id=str(comment.author_id),
                user_id=str(author_id),
            )
            raise NotAuthorizedError("comment", str(comment_id), str(author_id))

        return comment
