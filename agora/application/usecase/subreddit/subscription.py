"""Subscribe and unsubscribe use cases."""

from uuid import UUID

import logfire
from pydantic import Field

from agora.application.usecase.dto import WireModel
from agora.domain.service import SubredditService
from agora.domain.value import SubredditId, UserId


class SubscriptionRequest(WireModel):
    """Subscribe or unsubscribe request."""

    subreddit_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


class SubscriptionResponse(WireModel):
    """Subscription change response.

    The call is idempotent, so success only means the request was accepted.
    """

    success: bool
    subreddit_id: str
    user_id: str


def _parse_subreddit_id(raw: str) -> SubredditId | None:
    try:
        return SubredditId(UUID(raw))
    except ValueError:
        logfire.info("Subscription for non-UUID subreddit id", subreddit_id=raw)
        return None


class SubscribeUseCase:
    """Use case for subscribing to a community."""

    def __init__(self, subreddit_service: SubredditService) -> None:
        self.subreddit_service = subreddit_service

    async def execute(self, request: SubscriptionRequest) -> SubscriptionResponse:
        subreddit_id = _parse_subreddit_id(request.subreddit_id)
        if subreddit_id is not None:
            await self.subreddit_service.subscribe(
                subreddit_id, UserId(request.user_id)
            )
        return SubscriptionResponse(
            success=True, subreddit_id=request.subreddit_id, user_id=request.user_id
        )


class UnsubscribeUseCase:
    """Use case for leaving a community."""

    def __init__(self, subreddit_service: SubredditService) -> None:
        self.subreddit_service = subreddit_service

    async def execute(self, request: SubscriptionRequest) -> SubscriptionResponse:
        subreddit_id = _parse_subreddit_id(request.subreddit_id)
        if subreddit_id is not None:
            await self.subreddit_service.unsubscribe(
                subreddit_id, UserId(request.user_id)
            )
        return SubscriptionResponse(
            success=True, subreddit_id=request.subreddit_id, user_id=request.user_id
        )
