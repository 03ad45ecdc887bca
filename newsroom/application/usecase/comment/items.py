"""Comment payloads shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from newsroom.domain.model import Comment
from newsroom.domain.service import CommentTreeNode
from newsroom.domain.value import DisplayName, UserId


class CommentItem(BaseModel):
    """A single comment enriched with its author's name."""

    comment_id: str
    article_id: str
    author_id: str
    author_name: str | None
    content: str
    parent_id: str | None
    reply_ids: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls, comment: Comment, author_name: DisplayName | None
    ) -> "CommentItem":
        """Convert a domain comment to a response item."""
        return cls(
            comment_id=str(comment.id),
            article_id=str(comment.article_id),
            author_id=str(comment.author_id),
            author_name=author_name.root if author_name else None,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            reply_ids=[str(reply_id) for reply_id in comment.reply_ids],
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentThreadItem(BaseModel):
    """A comment with its replies nested recursively.

    ``replies`` holds full child nodes, not ids, so clients can render the
    thread without further requests.
    """

    comment_id: str
    article_id: str
    author_id: str
    author_name: str | None
    content: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime
    replies: list["CommentThreadItem"] = Field(default_factory=list)

    @classmethod
    def from_comment(
        cls, comment: Comment, author_name: DisplayName | None
    ) -> "CommentThreadItem":
        """Convert a single comment, without replies."""
        return cls(
            comment_id=str(comment.id),
            article_id=str(comment.article_id),
            author_id=str(comment.author_id),
            author_name=author_name.root if author_name else None,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )

    @classmethod
    def from_tree(
        cls, root: CommentTreeNode, names: dict[UserId, DisplayName]
    ) -> "CommentThreadItem":
        """Convert a domain comment tree, preserving reply order.

        Args:
            root: Root of the domain tree
            names: Author display names by user ID

        Returns:
            Root item with nested replies
        """
        root_item = cls.from_comment(root.comment, names.get(root.comment.author_id))
        pending = [(root, root_item)]
        while pending:
            node, item = pending.pop()
            for child in node.replies:
                child_item = cls.from_comment(
                    child.comment, names.get(child.comment.author_id)
                )
                item.replies.append(child_item)
                pending.append((child, child_item))
        return root_item
