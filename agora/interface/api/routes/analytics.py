"""Analytics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from agora.application.usecase.analytics import (
    TopSubredditsUseCase,
    TrendingPostsUseCase,
    UserEngagementUseCase,
)
from agora.interface.api.envelope import respond

router = APIRouter(prefix="/api/analytics", tags=["analytics"], route_class=DishkaRoute)


@router.get("/top-subreddits")
async def top_subreddits(
    top_subreddits_use_case: FromDishka[TopSubredditsUseCase],
) -> JSONResponse:
    """Communities with the most subscribers."""
    return await respond(top_subreddits_use_case.execute)


@router.get("/trending-posts")
async def trending_posts(
    trending_posts_use_case: FromDishka[TrendingPostsUseCase],
) -> JSONResponse:
    """Posts with the best score, then the most comments."""
    return await respond(trending_posts_use_case.execute)


@router.get("/user-engagement")
async def user_engagement(
    user_engagement_use_case: FromDishka[UserEngagementUseCase],
) -> JSONResponse:
    """Posts, comments and votes per active user."""
    return await respond(user_engagement_use_case.execute)
