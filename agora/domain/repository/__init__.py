"""Repository interfaces for Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.moderation import ModerationRepository
from agora.domain.repository.notification import NotificationRepository
from agora.domain.repository.post import PostRepository
from agora.domain.repository.subreddit import SubredditRepository
from agora.domain.repository.user import UserRepository
from agora.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "SubredditRepository",
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
    "ModerationRepository",
    "NotificationRepository",
]
