"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Dict, List, Optional

import logfire
from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, SubredditId, UserId
from agora.persistence.mappers import post_to_dict, row_to_post
from agora.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            existing = await self.find_by_id(post.id)
            post_dict = post_to_dict(post)

            if existing:
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = posts_table.insert().values(**post_dict)
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def find_recent(
        self,
        subreddit_id: Optional[SubredditId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first, with pagination."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.deleted_at.is_(None))
            .order_by(desc(posts_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        if subreddit_id is not None:
            stmt = stmt.where(posts_table.c.subreddit_id == subreddit_id)
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count(self, subreddit_id: Optional[SubredditId] = None) -> int:
        """Count posts matching the filter."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.deleted_at.is_(None))
        )
        if subreddit_id is not None:
            stmt = stmt.where(posts_table.c.subreddit_id == subreddit_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .where(posts_table.c.deleted_at.is_(None))
            .order_by(desc(posts_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def search(
        self,
        text: str,
        subreddit_id: Optional[SubredditId] = None,
        author_id: Optional[UserId] = None,
        since: Optional[datetime] = None,
    ) -> List[Post]:
        """Find posts whose title or content contains text."""
        pattern = f"%{text}%"
        stmt = (
            select(posts_table)
            .where(posts_table.c.deleted_at.is_(None))
            .where(
                or_(
                    posts_table.c.title.ilike(pattern),
                    posts_table.c.content.ilike(pattern),
                )
            )
        )
        if subreddit_id is not None:
            stmt = stmt.where(posts_table.c.subreddit_id == subreddit_id)
        if author_id is not None:
            stmt = stmt.where(posts_table.c.author_id == author_id)
        if since is not None:
            stmt = stmt.where(posts_table.c.created_at >= since)
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_trending(self, limit: int = 10) -> List[Post]:
        """Find posts by score, then comment count."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.deleted_at.is_(None))
            .order_by(
                desc(posts_table.c.upvotes - posts_table.c.downvotes),
                desc(posts_table.c.comment_count),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def adjust_votes(
        self, post_id: PostId, upvotes_delta: int, downvotes_delta: int
    ) -> None:
        """Atomically shift vote tallies."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(
                upvotes=func.greatest(posts_table.c.upvotes + upvotes_delta, 0),
                downvotes=func.greatest(posts_table.c.downvotes + downvotes_delta, 0),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment count by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(comment_count=posts_table.c.comment_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_author(self) -> Dict[UserId, int]:
        """Count posts per author."""
        stmt = (
            select(posts_table.c.author_id, func.count())
            .where(posts_table.c.deleted_at.is_(None))
            .group_by(posts_table.c.author_id)
        )
        result = await self.session.execute(stmt)
        return {UserId(author_id): count for author_id, count in result.fetchall()}
