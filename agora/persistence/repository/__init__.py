"""PostgreSQL repository implementations."""

from agora.persistence.repository.comment import PostgresCommentRepository
from agora.persistence.repository.moderation import PostgresModerationRepository
from agora.persistence.repository.notification import PostgresNotificationRepository
from agora.persistence.repository.post import PostgresPostRepository
from agora.persistence.repository.subreddit import PostgresSubredditRepository
from agora.persistence.repository.user import PostgresUserRepository
from agora.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresSubredditRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresModerationRepository",
    "PostgresNotificationRepository",
]
