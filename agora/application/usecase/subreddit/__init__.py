"""Subreddit use cases."""

from .check_name import CheckNameRequest, CheckNameResponse, CheckNameUseCase
from .create_subreddit import (
    CreateSubredditRequest,
    CreateSubredditResponse,
    CreateSubredditUseCase,
)
from .get_subreddit import GetSubredditRequest, GetSubredditResponse, GetSubredditUseCase
from .subscription import (
    SubscribeUseCase,
    SubscriptionRequest,
    SubscriptionResponse,
    UnsubscribeUseCase,
)

__all__ = [
    "CheckNameRequest",
    "CheckNameResponse",
    "CheckNameUseCase",
    "CreateSubredditRequest",
    "CreateSubredditResponse",
    "CreateSubredditUseCase",
    "GetSubredditRequest",
    "GetSubredditResponse",
    "GetSubredditUseCase",
    "SubscribeUseCase",
    "SubscriptionRequest",
    "SubscriptionResponse",
    "UnsubscribeUseCase",
]
