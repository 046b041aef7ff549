"""Search and analytics domain services."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Union
from uuid import UUID

import logfire

from agora.domain.model.comment import Comment
from agora.domain.model.post import Post
from agora.domain.model.subreddit import Subreddit
from agora.domain.repository import (
    CommentRepository,
    PostRepository,
    SubredditRepository,
    VoteRepository,
)
from agora.domain.value import (
    DateRange,
    SearchScope,
    SearchSort,
    SubredditId,
    UserId,
)

from .base import Service

SearchHit = Union[Post, Comment]


class SearchService(Service):
    """Case-insensitive substring search over posts and comments."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        subreddit_repository: SubredditRepository,
    ) -> None:
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.subreddit_repository = subreddit_repository

    async def search(
        self,
        query: str,
        scope: SearchScope = SearchScope.ALL,
        subreddit: str | None = None,
        author: str | None = None,
        date_range: DateRange | None = None,
        sort_by: SearchSort | None = None,
    ) -> list[SearchHit]:
        """Search posts and comments.

        Args:
            query: Text to look for in titles and bodies
            scope: Which content to search
            subreddit: Community ID or name, restricts post results only
            author: Author user ID
            date_range: Only include content created within this window
            sort_by: Result order, relevance when omitted

        Returns:
            Matching posts and comments
        """
        with logfire.span("search_service.search", query=query, scope=scope.value):
            author_id = UserId(author) if author else None
            since = None
            if date_range is not None and date_range.days is not None:
                since = datetime.now() - timedelta(days=date_range.days)

            hits: list[SearchHit] = []
            if scope in (SearchScope.ALL, SearchScope.POST):
                hits.extend(await self._search_posts(query, subreddit, author_id, since))
            if scope in (SearchScope.ALL, SearchScope.COMMENT):
                hits.extend(
                    await self.comment_repository.search(
                        query, author_id=author_id, since=since
                    )
                )

            if sort_by == SearchSort.DATE:
                hits.sort(key=lambda h: h.created_at, reverse=True)
            else:
                # Relevance is approximated by score
                hits.sort(key=lambda h: h.score, reverse=True)

            logfire.info("Search completed", query=query, hits=len(hits))
            return hits

    async def _search_posts(
        self,
        query: str,
        subreddit: str | None,
        author_id: UserId | None,
        since: datetime | None,
    ) -> list[Post]:
        subreddit_id = None
        if subreddit:
            subreddit_id = await self._resolve_subreddit(subreddit)
            if subreddit_id is None:
                return []
        return await self.post_repository.search(
            query, subreddit_id=subreddit_id, author_id=author_id, since=since
        )

    async def _resolve_subreddit(self, subreddit: str) -> SubredditId | None:
        try:
            return SubredditId(UUID(subreddit))
        except ValueError:
            found = await self.subreddit_repository.find_by_name(subreddit)
            return found.id if found else None


@dataclass(frozen=True)
class UserEngagement:
    """How much one user has contributed."""

    user_id: UserId
    posts: int
    comments: int
    votes: int


class AnalyticsService(Service):
    """Aggregate figures across the whole site."""

    def __init__(
        self,
        subreddit_repository: SubredditRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> None:
        self.subreddit_repository = subreddit_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository

    async def top_subreddits(self, limit: int = 10) -> list[Subreddit]:
        return await self.subreddit_repository.find_top(limit)

    async def trending_posts(self, limit: int = 10) -> list[Post]:
        return await self.post_repository.find_trending(limit)

    async def user_engagement(self) -> list[UserEngagement]:
        """Count posts, comments and votes for every active user.

        Returns:
            One entry per user with any activity, most active first
        """
        posts = await self.post_repository.count_by_author()
        comments = await self.comment_repository.count_by_author()
        votes = await self.vote_repository.count_by_user()

        users = set(posts) | set(comments) | set(votes)
        engagement = [
            UserEngagement(
                user_id=user_id,
                posts=posts.get(user_id, 0),
                comments=comments.get(user_id, 0),
                votes=votes.get(user_id, 0),
            )
            for user_id in users
        ]
        engagement.sort(
            key=lambda e: (e.posts + e.comments + e.votes, e.user_id), reverse=True
        )
        return engagement
