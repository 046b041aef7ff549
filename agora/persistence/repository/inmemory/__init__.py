"""In-memory repository implementations."""

from .comment import InMemoryCommentRepository
from .moderation import InMemoryModerationRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .subreddit import InMemorySubredditRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryModerationRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemorySubredditRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
