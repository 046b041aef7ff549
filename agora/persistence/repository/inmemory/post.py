"""In-memory post repository."""

from collections import Counter
from datetime import datetime
from typing import Optional

from agora.domain.model.post import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId, SubredditId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def find_recent(
        self,
        subreddit_id: Optional[SubredditId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts newest first, with pagination."""
        posts = self._visible(subreddit_id)
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count(self, subreddit_id: Optional[SubredditId] = None) -> int:
        """Count posts matching the filter."""
        return len(self._visible(subreddit_id))

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find posts by a specific author."""
        posts = [p for p in self._visible() if p.author_id == author_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def search(
        self,
        text: str,
        subreddit_id: Optional[SubredditId] = None,
        author_id: Optional[UserId] = None,
        since: Optional[datetime] = None,
    ) -> list[Post]:
        """Find posts whose title or content contains text."""
        needle = text.lower()
        posts = [
            p
            for p in self._visible(subreddit_id)
            if needle in p.title.lower() or needle in p.content.lower()
        ]
        if author_id is not None:
            posts = [p for p in posts if p.author_id == author_id]
        if since is not None:
            posts = [p for p in posts if p.created_at >= since]
        return posts

    async def find_trending(self, limit: int = 10) -> list[Post]:
        """Find posts by score, then comment count."""
        posts = self._visible()
        posts.sort(key=lambda p: (p.score, p.comment_count), reverse=True)
        return posts[:limit]

    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> None:
        """Shift vote tallies (votes don't update timestamps)."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={
                    "upvotes": max(0, post.upvotes + upvotes_delta),
                    "downvotes": max(0, post.downvotes + downvotes_delta),
                }
            )

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Increment comment count by 1."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"comment_count": post.comment_count + 1}
            )

    def _visible(self, subreddit_id: Optional[SubredditId] = None) -> list[Post]:
        posts = [p for p in self._posts.values() if p.deleted_at is None]
        if subreddit_id is not None:
            posts = [p for p in posts if p.subreddit_id == subreddit_id]
        return posts

    async def count_by_author(self) -> dict[UserId, int]:
        """Count posts per author."""
        return dict(Counter(p.author_id for p in self._visible()))
