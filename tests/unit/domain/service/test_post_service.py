"""Unit tests for PostService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from agora.domain.error import NotFoundError
from agora.domain.repository import PostRepository
from agora.domain.service import PostService
from agora.domain.value import PostId, SubredditId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPostService:
    """Tests for creating, fetching and listing posts."""

    @pytest.mark.asyncio
    async def test_create_post_starts_with_zero_tallies(self, unit_env):
        """A new post should have no votes and no comments."""
        # Arrange
        service = await unit_env.get(PostService)
        subreddit_id = SubredditId(uuid4())

        # Act
        post = await service.create_post(
            "Hello", "World", subreddit_id, UserId("alice")
        )

        # Assert
        fetched = await service.get_post(post.id)
        assert fetched.title == "Hello"
        assert fetched.subreddit_id == subreddit_id
        assert fetched.score == 0
        assert fetched.comment_count == 0

    @pytest.mark.asyncio
    async def test_get_missing_post_raises(self, unit_env):
        """Fetching an unknown post should raise NotFoundError."""
        # Arrange
        service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_post(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_posts_newest_first_with_total(self, unit_env):
        """Listing should page newest first and report the full total."""
        # Arrange
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        start = datetime(2024, 1, 1)
        posts = [
            await repo.save(make_post(created_at=start + timedelta(hours=i)))
            for i in range(5)
        ]

        # Act
        page_two, total = await service.list_posts(page=2, page_size=2)

        # Assert
        assert total == 5
        assert [p.id for p in page_two] == [posts[2].id, posts[1].id]

    @pytest.mark.asyncio
    async def test_list_posts_filters_by_subreddit(self, unit_env):
        """Only posts from the requested community should be listed."""
        # Arrange
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        subreddit_id = SubredditId(uuid4())
        mine = await repo.save(make_post(subreddit_id=subreddit_id))
        await repo.save(make_post())

        # Act
        posts, total = await service.list_posts(subreddit_id=subreddit_id)

        # Assert
        assert total == 1
        assert [p.id for p in posts] == [mine.id]
