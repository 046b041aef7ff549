"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from agora.domain.model.post import Post
from agora.domain.value import PostId, SubredditId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Deleted posts are never returned by list or search methods.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def find_recent(
        self,
        subreddit_id: Optional[SubredditId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest first.

        Args:
            subreddit_id: Optional community filter
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Page of posts
        """
        pass

    @abstractmethod
    async def count(self, subreddit_id: Optional[SubredditId] = None) -> int:
        """Count posts, optionally within one community."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find all posts written by a user, newest first."""
        pass

    @abstractmethod
    async def search(
        self,
        text: str,
        subreddit_id: Optional[SubredditId] = None,
        author_id: Optional[UserId] = None,
        since: Optional[datetime] = None,
    ) -> List[Post]:
        """Find posts whose title or content contains text, ignoring case.

        Args:
            text: Substring to look for
            subreddit_id: Optional community filter
            author_id: Optional author filter
            since: Optional lower bound on creation time

        Returns:
            Matching posts in no particular order
        """
        pass

    @abstractmethod
    async def find_trending(self, limit: int = 10) -> List[Post]:
        """Find posts with the highest score, then most comments."""
        pass

    @abstractmethod
    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> None:
        """Atomically shift the post's vote tallies."""
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the post's comment count."""
        pass

    @abstractmethod
    async def count_by_author(self) -> Dict[UserId, int]:
        """Count non-deleted items written by every author."""
        pass
