"""Create subreddit use case."""

from pydantic import Field

from agora.application.usecase.dto import SubredditItem, WireModel
from agora.domain.service import SubredditService
from agora.domain.value import UserId


class CreateSubredditRequest(WireModel):
    """Create subreddit request."""

    name: str = Field(min_length=3, max_length=21, pattern=r"^[a-zA-Z0-9_]+$")
    description: str = Field(max_length=500)
    creator_id: str = Field(default="anonymous", min_length=1)


class CreateSubredditResponse(WireModel):
    """Create subreddit response."""

    subreddit: SubredditItem


class CreateSubredditUseCase:
    """Use case for creating a community."""

    def __init__(self, subreddit_service: SubredditService) -> None:
        """Initialize create subreddit use case.

        Args:
            subreddit_service: Subreddit domain service
        """
        self.subreddit_service = subreddit_service

    async def execute(self, request: CreateSubredditRequest) -> CreateSubredditResponse:
        """Execute create subreddit flow.

        Raises:
            BusinessRuleViolationError: If the name is reserved or taken
        """
        subreddit = await self.subreddit_service.create_subreddit(
            name=request.name,
            description=request.description,
            creator_id=UserId(request.creator_id),
        )
        return CreateSubredditResponse(
            subreddit=SubredditItem.model_validate(subreddit)
        )
