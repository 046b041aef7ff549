"""Get user use cases."""

import logfire

from agora.application.usecase.dto import (
    CommentItem,
    PostItem,
    UserItem,
    VoteItem,
    WireModel,
)
from agora.domain.service import UserService
from agora.domain.value import UserId


class GetUserRequest(WireModel):
    """Get user request."""

    user_id: str


class GetUserResponse(WireModel):
    """Get user response."""

    user: UserItem


class GetUserActivityResponse(WireModel):
    """Everything a user has contributed."""

    posts: list[PostItem]
    comments: list[CommentItem]
    votes: list[VoteItem]


class GetUserUseCase:
    """Use case for looking up a user profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_user(UserId(request.user_id))
        return GetUserResponse(user=UserItem.model_validate(user))


class GetUserActivityUseCase:
    """Use case for listing a user's posts, comments and votes."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserActivityResponse:
        """Execute get user activity flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        posts, comments, votes = await self.user_service.get_activity(
            UserId(request.user_id)
        )
        logfire.info(
            "User activity loaded",
            user_id=request.user_id,
            posts=len(posts),
            comments=len(comments),
            votes=len(votes),
        )
        return GetUserActivityResponse(
            posts=[PostItem.model_validate(p) for p in posts],
            comments=[CommentItem.model_validate(c) for c in comments],
            votes=[VoteItem.model_validate(v) for v in votes],
        )
