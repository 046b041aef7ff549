"""In-memory vote repository."""

from collections import Counter
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from agora.domain.model.vote import Vote
from agora.domain.repository.vote import VoteRepository
from agora.domain.value import UserId, VoteId, VoteTarget


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository."""

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, VoteTarget, UUID], Vote] = {}

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTarget,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a vote by user and target; nothing to lock in memory."""
        return self._votes.get((user_id, target_type, target_id))

    async def find_by_user(self, user_id: UserId) -> list[Vote]:
        """Find all votes by a user."""
        votes = [v for v in self._votes.values() if v.user_id == user_id]
        votes.sort(key=lambda v: v.created_at, reverse=True)
        return votes

    async def add(self, vote: Vote) -> Vote:
        """Record a first vote, rejecting a second one on the same target."""
        key = (vote.user_id, vote.target_type, vote.target_id)
        if key in self._votes:
            raise IntegrityError("Duplicate vote", None, Exception())
        self._votes[key] = vote
        return vote

    async def save(self, vote: Vote) -> Vote:
        """Save a vote, replacing any vote on the same target."""
        self._votes[(vote.user_id, vote.target_type, vote.target_id)] = vote
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        for key, vote in self._votes.items():
            if vote.id == vote_id:
                del self._votes[key]
                return True
        return False

    async def count_by_user(self) -> dict[UserId, int]:
        """Count votes per user."""
        return dict(Counter(v.user_id for v in self._votes.values()))
