"""PostgreSQL implementation of Subreddit repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Subreddit
from agora.domain.repository import SubredditRepository
from agora.domain.value import SubredditId, UserId
from agora.persistence.mappers import row_to_subreddit, subreddit_to_dict
from agora.persistence.tables import subreddits_table, subscriptions_table


class PostgresSubredditRepository(SubredditRepository):
    """PostgreSQL implementation of SubredditRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID."""
        stmt = select(subreddits_table).where(subreddits_table.c.id == subreddit_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_subreddit(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[Subreddit]:
        """Find a subreddit by name, ignoring case."""
        stmt = select(subreddits_table).where(
            func.lower(subreddits_table.c.name) == name.lower()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_subreddit(row._asdict()) if row else None

    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save a subreddit (create or update).

        Writes in a savepoint; a name clash on idx_subreddits_name_lower
        raises IntegrityError and leaves the request transaction usable.
        """
        existing = await self.find_by_id(subreddit.id)
        subreddit_dict = subreddit_to_dict(subreddit)

        if existing:
            stmt = (
                subreddits_table.update()
                .where(subreddits_table.c.id == subreddit.id)
                .values(**subreddit_dict)
            )
        else:
            stmt = subreddits_table.insert().values(**subreddit_dict)
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return subreddit

    async def find_top(self, limit: int = 10) -> List[Subreddit]:
        """Find the largest communities."""
        stmt = (
            select(subreddits_table)
            .order_by(desc(subreddits_table.c.subscriber_count))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_subreddit(row._asdict()) for row in result.fetchall()]

    async def add_subscriber(self, subreddit_id: SubredditId, user_id: UserId) -> bool:
        """Subscribe a user and atomically bump the subscriber count."""
        stmt = (
            insert(subscriptions_table)
            .values(subreddit_id=subreddit_id, user_id=user_id)
            .on_conflict_do_nothing(constraint="unique_subscription")
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return False

        await self._shift_count(subreddit_id, 1)
        return True

    async def remove_subscriber(
        self, subreddit_id: SubredditId, user_id: UserId
    ) -> bool:
        """Unsubscribe a user and atomically lower the subscriber count."""
        stmt = delete(subscriptions_table).where(
            and_(
                subscriptions_table.c.subreddit_id == subreddit_id,
                subscriptions_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return False

        await self._shift_count(subreddit_id, -1)
        return True

    async def _shift_count(self, subreddit_id: SubredditId, delta: int) -> None:
        stmt = (
            subreddits_table.update()
            .where(subreddits_table.c.id == subreddit_id)
            .values(
                subscriber_count=func.greatest(
                    subreddits_table.c.subscriber_count + delta, 0
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
