"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from agora.domain.model.vote import Vote
from agora.domain.value import UserId, VoteId, VoteTarget


class VoteRepository(ABC):
    """Repository for Vote entity.

    At most one vote exists per user and target.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTarget,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            target_type: Type of item (post or comment)
            target_id: ID of the item
            for_update: Hold the row until the transaction ends, so a
                concurrent vote on the same target waits for this one

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user, newest first."""
        pass

    @abstractmethod
    async def add(self, vote: Vote) -> Vote:
        """Record a first vote by a user on a target.

        Raises:
            IntegrityError: If the user already has a vote on the target
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote, replacing the user's existing vote on the same target.

        Args:
            vote: The vote to save

        Returns:
            The saved vote
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def count_by_user(self) -> Dict[UserId, int]:
        """Count votes cast by every user who has voted."""
        pass
