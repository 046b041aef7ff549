"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .moderation_service import ModerationService
from .notification_service import NotificationService
from .optimistic_vote import (
    OptimisticVote,
    OptimisticVoteFactory,
    Scheduler,
    TimerHandle,
)
from .post_service import PostService
from .search_service import AnalyticsService, SearchHit, SearchService, UserEngagement
from .subreddit_service import SubredditService
from .user_service import UserService
from .vote_service import VoteService
from .vote_state import VoteState, VoteTransition, apply_vote, transition

__all__ = [
    "AnalyticsService",
    "CommentService",
    "ModerationService",
    "NotificationService",
    "OptimisticVote",
    "OptimisticVoteFactory",
    "PostService",
    "Scheduler",
    "SearchHit",
    "SearchService",
    "Service",
    "SubredditService",
    "TimerHandle",
    "UserEngagement",
    "UserService",
    "VoteService",
    "VoteState",
    "VoteTransition",
    "apply_vote",
    "transition",
]
