"""PostgreSQL implementation of Vote repository."""

from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import UserId, VoteId, VoteTarget
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTarget,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item, optionally locking the row."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.user_id == user_id)
            .order_by(desc(votes_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def add(self, vote: Vote) -> Vote:
        """Insert a first vote; the unique_vote constraint rejects a second.

        The insert runs in a savepoint so a duplicate leaves the request
        transaction usable.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                votes_table.insert().values(**vote_to_dict(vote))
            )
        return vote

    async def save(self, vote: Vote) -> Vote:
        """Save a vote, replacing the user's vote on the same target."""
        vote_dict = vote_to_dict(vote)
        stmt = insert(votes_table).values(**vote_dict)
        stmt = stmt.on_conflict_do_update(
            constraint="unique_vote",
            set_={
                "id": stmt.excluded.id,
                "vote_type": stmt.excluded.vote_type,
                "created_at": stmt.excluded.created_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_user(self) -> Dict[UserId, int]:
        """Count votes per user."""
        stmt = select(votes_table.c.user_id, func.count()).group_by(
            votes_table.c.user_id
        )
        result = await self.session.execute(stmt)
        return {UserId(user_id): count for user_id, count in result.fetchall()}
