"""Check subreddit name use case."""

from agora.application.usecase.dto import WireModel
from agora.domain.service import SubredditService


class CheckNameRequest(WireModel):
    """Check name request."""

    name: str


class CheckNameResponse(WireModel):
    """Check name response; error is only set when the name is unavailable."""

    available: bool
    error: str | None = None


class CheckNameUseCase:
    """Use case for checking whether a community name can be claimed."""

    def __init__(self, subreddit_service: SubredditService) -> None:
        self.subreddit_service = subreddit_service

    async def execute(self, request: CheckNameRequest) -> CheckNameResponse:
        problem = await self.subreddit_service.check_name(request.name)
        return CheckNameResponse(available=problem is None, error=problem)
