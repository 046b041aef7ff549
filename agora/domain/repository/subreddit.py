"""Subreddit repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.subreddit import Subreddit
from agora.domain.value import SubredditId, UserId


class SubredditRepository(ABC):
    """Repository for Subreddit aggregate and its subscriptions."""

    @abstractmethod
    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID.

        Args:
            subreddit_id: The subreddit's unique identifier

        Returns:
            The subreddit if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Subreddit]:
        """Find a subreddit by name, ignoring case.

        Args:
            name: Community name

        Returns:
            The subreddit if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save a subreddit (create or update).

        Args:
            subreddit: The subreddit to save

        Returns:
            The saved subreddit

        Raises:
            IntegrityError: If another community has the same name, ignoring case
        """
        pass

    @abstractmethod
    async def find_top(self, limit: int = 10) -> List[Subreddit]:
        """Find the communities with the most subscribers.

        Args:
            limit: Maximum number of communities to return

        Returns:
            Subreddits ordered by subscriber count, largest first
        """
        pass

    @abstractmethod
    async def add_subscriber(self, subreddit_id: SubredditId, user_id: UserId) -> bool:
        """Subscribe a user and increment the subscriber count.

        Args:
            subreddit_id: Community to subscribe to
            user_id: Subscribing user

        Returns:
            True if a subscription was created, False if it already existed
        """
        pass

    @abstractmethod
    async def remove_subscriber(
        self, subreddit_id: SubredditId, user_id: UserId
    ) -> bool:
        """Unsubscribe a user and decrement the subscriber count.

        Args:
            subreddit_id: Community to leave
            user_id: Unsubscribing user

        Returns:
            True if a subscription was removed, False if none existed
        """
        pass
