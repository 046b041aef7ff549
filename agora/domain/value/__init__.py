"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    CommentId,
    ModerationActionId,
    NotificationId,
    PostId,
    SubredditId,
    UserId,
    VoteId,
)
from agora.domain.value.types import (
    DateRange,
    ModerationKind,
    NotificationType,
    SearchScope,
    SearchSort,
    VoteChoice,
    VoteTarget,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "SubredditId",
    "PostId",
    "CommentId",
    "VoteId",
    "ModerationActionId",
    "NotificationId",
    # Types
    "VoteType",
    "VoteChoice",
    "VoteTarget",
    "ModerationKind",
    "NotificationType",
    "SearchScope",
    "DateRange",
    "SearchSort",
]
