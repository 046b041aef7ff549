"""List posts use case."""

import math
from uuid import UUID

import logfire
from pydantic import Field

from agora.application.usecase.dto import PostItem, WireModel
from agora.domain.service import PostService
from agora.domain.value import SubredditId


class ListPostsRequest(WireModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)
    subreddit_id: UUID | None = None


class ListPostsResponse(WireModel):
    """List posts response."""

    posts: list[PostItem]
    page: int
    page_size: int
    total: int
    total_pages: int


class ListPostsUseCase:
    """Use case for listing posts newest first, page by page."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Pagination and filter

        Returns:
            One page of posts with pagination metadata
        """
        with logfire.span(
            "list_posts.execute",
            page=request.page,
            page_size=request.page_size,
            subreddit_id=str(request.subreddit_id) if request.subreddit_id else None,
        ):
            posts, total = await self.post_service.list_posts(
                page=request.page,
                page_size=request.page_size,
                subreddit_id=(
                    SubredditId(request.subreddit_id) if request.subreddit_id else None
                ),
            )
            logfire.info("Posts listed", count=len(posts), total=total)

            return ListPostsResponse(
                posts=[PostItem.model_validate(p) for p in posts],
                page=request.page,
                page_size=request.page_size,
                total=total,
                total_pages=math.ceil(total / request.page_size),
            )
