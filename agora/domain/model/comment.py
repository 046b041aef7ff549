"""Comment entity.

Comments are threaded discussions on posts. A comment without a parent is
top-level; replies point at their parent comment.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    content: str = Field(min_length=1, max_length=10000)
    author_id: UserId
    post_id: PostId
    parent_comment_id: Optional[CommentId] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def score(self) -> int:
        """Net score shown next to the comment."""
        return self.upvotes - self.downvotes

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
