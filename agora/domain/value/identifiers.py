"""Strongly typed identifiers for Agora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.

User identifiers come from an external identity provider and are opaque
strings; everything Agora creates itself is keyed by UUID.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", str)
SubredditId = NewType("SubredditId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
ModerationActionId = NewType("ModerationActionId", UUID)
NotificationId = NewType("NotificationId", UUID)
