"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import PostId, SubredditId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Upvote and downvote tallies are denormalised onto the post and kept in
    step with the vote ledger by the vote service.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=40000)
    author_id: UserId
    subreddit_id: SubredditId
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def score(self) -> int:
        """Net score shown next to the post."""
        return self.upvotes - self.downvotes
