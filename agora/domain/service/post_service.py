"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model.post import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, SubredditId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        title: str,
        content: str,
        subreddit_id: SubredditId,
        author_id: UserId,
    ) -> Post:
        """Create a post in a community.

        Args:
            title: Post title
            content: Post body
            subreddit_id: Community the post is submitted to
            author_id: Author user ID

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            subreddit_id=str(subreddit_id),
            author_id=author_id,
        ):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                subreddit_id=subreddit_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist or was deleted
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None or post.deleted_at is not None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(
        self,
        page: int = 1,
        page_size: int = 10,
        subreddit_id: SubredditId | None = None,
    ) -> tuple[list[Post], int]:
        """List posts newest first, one page at a time.

        Args:
            page: 1-based page number
            page_size: Posts per page
            subreddit_id: Optional community filter

        Returns:
            The page of posts and the total number of matching posts
        """
        offset = (page - 1) * page_size
        posts = await self.post_repository.find_recent(
            subreddit_id=subreddit_id, limit=page_size, offset=offset
        )
        total = await self.post_repository.count(subreddit_id=subreddit_id)
        return posts, total
