"""Analytics use cases."""

from .analytics import (
    EngagementItem,
    TopSubredditsResponse,
    TopSubredditsUseCase,
    TrendingPostsResponse,
    TrendingPostsUseCase,
    UserEngagementResponse,
    UserEngagementUseCase,
)

__all__ = [
    "EngagementItem",
    "TopSubredditsResponse",
    "TopSubredditsUseCase",
    "TrendingPostsResponse",
    "TrendingPostsUseCase",
    "UserEngagementResponse",
    "UserEngagementUseCase",
]
