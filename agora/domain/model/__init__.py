"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.moderation import ModerationAction
from agora.domain.model.notification import Notification
from agora.domain.model.post import Post
from agora.domain.model.subreddit import Subreddit
from agora.domain.model.user import User
from agora.domain.model.vote import Vote

__all__ = [
    "User",
    "Subreddit",
    "Post",
    "Comment",
    "Vote",
    "ModerationAction",
    "Notification",
]
