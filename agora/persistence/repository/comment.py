"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, PostId, UserId
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def find_children(
        self, post_id: PostId, parent_id: Optional[CommentId] = None
    ) -> List[Comment]:
        """Find direct children of a parent, oldest first."""
        parent_clause = (
            comments_table.c.parent_comment_id.is_(None)
            if parent_id is None
            else comments_table.c.parent_comment_id == parent_id
        )
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(parent_clause)
            .where(comments_table.c.deleted_at.is_(None))
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_replies(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count direct replies for several comments in one query."""
        counts = {cid: 0 for cid in comment_ids}
        if not comment_ids:
            return counts

        stmt = (
            select(comments_table.c.parent_comment_id, func.count())
            .where(comments_table.c.parent_comment_id.in_(list(comment_ids)))
            .where(comments_table.c.deleted_at.is_(None))
            .group_by(comments_table.c.parent_comment_id)
        )
        result = await self.session.execute(stmt)
        for parent_id, count in result.fetchall():
            counts[CommentId(parent_id)] = count
        return counts

    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find comments by a specific author."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .where(comments_table.c.deleted_at.is_(None))
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def search(
        self,
        text: str,
        author_id: Optional[UserId] = None,
        since: Optional[datetime] = None,
    ) -> List[Comment]:
        """Find comments whose content contains text."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.deleted_at.is_(None))
            .where(comments_table.c.content.ilike(f"%{text}%"))
        )
        if author_id is not None:
            stmt = stmt.where(comments_table.c.author_id == author_id)
        if since is not None:
            stmt = stmt.where(comments_table.c.created_at >= since)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def adjust_votes(
        self, comment_id: CommentId, upvotes_delta: int, downvotes_delta: int
    ) -> None:
        """Atomically shift vote tallies."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(
                upvotes=func.greatest(comments_table.c.upvotes + upvotes_delta, 0),
                downvotes=func.greatest(
                    comments_table.c.downvotes + downvotes_delta, 0
                ),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_author(self) -> Dict[UserId, int]:
        """Count comments per author."""
        stmt = (
            select(comments_table.c.author_id, func.count())
            .where(comments_table.c.deleted_at.is_(None))
            .group_by(comments_table.c.author_id)
        )
        result = await self.session.execute(stmt)
        return {UserId(author_id): count for author_id, count in result.fetchall()}
