"""Comment entity.

Comments form a forest per article: a top-level comment has no parent,
and every reply points at exactly one parent comment on the same article.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsroom.domain.model.common import DomainModel
from newsroom.domain.value import ArticleId, CommentId, UserId

MAX_CONTENT_LENGTH = 10000


class Comment(DomainModel):
    """Comment entity.

    Threading is defined by ``parent_id`` alone. ``reply_ids`` is a
    denormalized cache of direct replies kept for clients that render from
    the document; it is never used to walk the tree.
    """

    id: CommentId
    article_id: ArticleId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_id: Optional[CommentId] = None
    reply_ids: list[CommentId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        """Whether the comment is attached directly to the article."""
        return self.parent_id is None
