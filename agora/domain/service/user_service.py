"""User domain service."""

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.comment import Comment
from agora.domain.model.post import Post
from agora.domain.model.user import User
from agora.domain.model.vote import Vote
from agora.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from agora.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user profiles and activity."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository
            comment_repository: Comment repository
            vote_repository: Vote repository
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository

    async def get_user(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=user_id)
            raise NotFoundError("User", user_id)
        return user

    async def get_activity(
        self, user_id: UserId
    ) -> tuple[list[Post], list[Comment], list[Vote]]:
        """Collect everything a user has posted, commented and voted.

        Args:
            user_id: The user's ID

        Returns:
            Posts, comments and votes, each newest first

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.get_activity", user_id=user_id):
            await self.get_user(user_id)
            posts = await self.post_repository.find_by_author(user_id)
            comments = await self.comment_repository.find_by_author(user_id)
            votes = await self.vote_repository.find_by_user(user_id)
            return posts, comments, votes
