"""Get subreddit use case."""

from uuid import UUID

from agora.application.usecase.dto import SubredditItem, WireModel
from agora.domain.error import NotFoundError
from agora.domain.service import SubredditService
from agora.domain.value import SubredditId


class GetSubredditRequest(WireModel):
    """Get subreddit request."""

    subreddit_id: str


class GetSubredditResponse(WireModel):
    """Get subreddit response."""

    subreddit: SubredditItem


class GetSubredditUseCase:
    """Use case for looking up a community."""

    def __init__(self, subreddit_service: SubredditService) -> None:
        self.subreddit_service = subreddit_service

    async def execute(self, request: GetSubredditRequest) -> GetSubredditResponse:
        """Execute get subreddit flow.

        Raises:
            NotFoundError: If the community does not exist
        """
        try:
            subreddit_id = SubredditId(UUID(request.subreddit_id))
        except ValueError:
            raise NotFoundError("Subreddit", request.subreddit_id) from None

        subreddit = await self.subreddit_service.get_subreddit(subreddit_id)
        return GetSubredditResponse(subreddit=SubredditItem.model_validate(subreddit))
