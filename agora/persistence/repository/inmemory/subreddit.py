"""In-memory subreddit repository."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model.subreddit import Subreddit
from agora.domain.repository.subreddit import SubredditRepository
from agora.domain.value import SubredditId, UserId


class InMemorySubredditRepository(SubredditRepository):
    """In-memory implementation of SubredditRepository."""

    def __init__(self) -> None:
        self._subreddits: dict[SubredditId, Subreddit] = {}
        self._subscriptions: set[tuple[SubredditId, UserId]] = set()

    async def find_by_id(self, subreddit_id: SubredditId) -> Optional[Subreddit]:
        """Find a subreddit by ID."""
        return self._subreddits.get(subreddit_id)

    async def find_by_name(self, name: str) -> Optional[Subreddit]:
        """Find a subreddit by name, ignoring case."""
        return self._named(name)

    async def save(self, subreddit: Subreddit) -> Subreddit:
        """Save or update a subreddit.

        Raises:
            IntegrityError: If another community already has the name
        """
        clash = self._named(subreddit.name)
        if clash is not None and clash.id != subreddit.id:
            raise IntegrityError("Duplicate subreddit name", None, Exception())
        self._subreddits[subreddit.id] = subreddit
        return subreddit

    async def find_top(self, limit: int = 10) -> list[Subreddit]:
        """Find the largest communities."""
        subreddits = sorted(
            self._subreddits.values(),
            key=lambda s: s.subscriber_count,
            reverse=True,
        )
        return subreddits[:limit]

    async def add_subscriber(self, subreddit_id: SubredditId, user_id: UserId) -> bool:
        """Subscribe a user, bumping the count if the community is known."""
        key = (subreddit_id, user_id)
        if key in self._subscriptions:
            return False
        self._subscriptions.add(key)
        self._shift_count(subreddit_id, 1)
        return True

    async def remove_subscriber(
        self, subreddit_id: SubredditId, user_id: UserId
    ) -> bool:
        """Unsubscribe a user, lowering the count if the community is known."""
        key = (subreddit_id, user_id)
        if key not in self._subscriptions:
            return False
        self._subscriptions.discard(key)
        self._shift_count(subreddit_id, -1)
        return True

    def _shift_count(self, subreddit_id: SubredditId, delta: int) -> None:
        subreddit = self._subreddits.get(subreddit_id)
        if subreddit:
            self._subreddits[subreddit_id] = subreddit.model_copy(
                update={"subscriber_count": max(0, subreddit.subscriber_count + delta)}
            )

    def _named(self, name: str) -> Optional[Subreddit]:
        wanted = name.lower()
        for subreddit in self._subreddits.values():
            if subreddit.name.lower() == wanted:
                return subreddit
        return None
