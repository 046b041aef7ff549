"""Site analytics use cases."""

from agora.application.usecase.dto import PostItem, SubredditItem, WireModel
from agora.domain.service import AnalyticsService

TOP_LIMIT = 10


class TopSubredditsResponse(WireModel):
    top_subreddits: list[SubredditItem]


class TrendingPostsResponse(WireModel):
    trending_posts: list[PostItem]


class EngagementItem(WireModel):
    user_id: str
    posts: int
    comments: int
    votes: int


class UserEngagementResponse(WireModel):
    engagement: list[EngagementItem]


class TopSubredditsUseCase:
    """Use case for listing the largest communities."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self) -> TopSubredditsResponse:
        subreddits = await self.analytics_service.top_subreddits(TOP_LIMIT)
        return TopSubredditsResponse(
            top_subreddits=[SubredditItem.model_validate(s) for s in subreddits]
        )


class TrendingPostsUseCase:
    """Use case for listing the best scoring posts."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self) -> TrendingPostsResponse:
        posts = await self.analytics_service.trending_posts(TOP_LIMIT)
        return TrendingPostsResponse(
            trending_posts=[PostItem.model_validate(p) for p in posts]
        )


class UserEngagementUseCase:
    """Use case for per-user activity counts."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self) -> UserEngagementResponse:
        engagement = await self.analytics_service.user_engagement()
        return UserEngagementResponse(
            engagement=[EngagementItem.model_validate(e) for e in engagement]
        )
