"""Wire models shared by use cases.

Requests and responses cross the HTTP boundary in camelCase; Python code
uses snake_case attribute names. Items are built straight from domain
models (from_attributes).
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from agora.domain.value import NotificationType, VoteTarget, VoteType


class WireModel(BaseModel):
    """Base for request and response models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


class UserItem(WireModel):
    id: str
    username: str
    email: str | None
    karma: int
    created_at: datetime
    updated_at: datetime


class SubredditItem(WireModel):
    id: UUID
    name: str
    description: str
    creator_id: str
    subscriber_count: int
    created_at: datetime
    updated_at: datetime


class PostItem(WireModel):
    id: UUID
    title: str
    content: str
    author_id: str
    subreddit_id: UUID
    upvotes: int
    downvotes: int
    score: int
    comment_count: int
    created_at: datetime
    updated_at: datetime


class CommentItem(WireModel):
    id: UUID
    content: str
    author_id: str
    post_id: UUID
    parent_comment_id: UUID | None
    upvotes: int
    downvotes: int
    score: int
    created_at: datetime
    updated_at: datetime


class VoteItem(WireModel):
    id: UUID
    user_id: str
    target_id: UUID
    target_type: VoteTarget
    vote_type: VoteType
    created_at: datetime


class NotificationItem(WireModel):
    id: UUID
    type: NotificationType
    message: str
    read: bool
    created_at: datetime
