"""Create post use case."""

from uuid import UUID

from pydantic import Field

from agora.application.usecase.dto import PostItem, WireModel
from agora.domain.service import PostService
from agora.domain.value import SubredditId, UserId


class CreatePostRequest(WireModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=40000)
    subreddit_id: UUID
    author_id: str = Field(default="anonymous", min_length=1)


class CreatePostResponse(WireModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase:
    """Use case for submitting a post to a community."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Validated post data

        Returns:
            The created post
        """
        post = await self.post_service.create_post(
            title=request.title,
            content=request.content,
            subreddit_id=SubredditId(request.subreddit_id),
            author_id=UserId(request.author_id),
        )
        return CreatePostResponse(post=PostItem.model_validate(post))
