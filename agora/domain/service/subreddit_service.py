"""Subreddit domain service."""

import re
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import BusinessRuleViolationError, NotFoundError
from agora.domain.model.subreddit import Subreddit
from agora.domain.repository import SubredditRepository
from agora.domain.value import SubredditId, UserId

from .base import Service

NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")


class SubredditService(Service):
    """Domain service for communities and subscriptions."""

    def __init__(
        self,
        subreddit_repository: SubredditRepository,
        reserved_names: Sequence[str] = (),
    ) -> None:
        """Initialize subreddit service.

        Args:
            subreddit_repository: Subreddit repository
            reserved_names: Names nobody may claim, compared ignoring case
        """
        self.subreddit_repository = subreddit_repository
        self.reserved_names = {name.lower() for name in reserved_names}

    async def check_name(self, name: str) -> str | None:
        """Check whether a community name can be claimed.

        Args:
            name: Requested community name

        Returns:
            None if the name is available, otherwise the reason it is not
        """
        if len(name) < 3 or len(name) > 21:
            return "Name must be between 3 and 21 characters"
        if not NAME_PATTERN.match(name):
            return "Name can only contain letters, numbers, and underscores"
        if name.lower() in self.reserved_names:
            return "This name is reserved and cannot be used"
        if await self.subreddit_repository.find_by_name(name) is not None:
            return "This community name is already taken"
        return None

    async def create_subreddit(
        self, name: str, description: str, creator_id: UserId
    ) -> Subreddit:
        """Create a community; the creator is its first subscriber.

        Raises:
            BusinessRuleViolationError: If the name is reserved or taken
        """
        with logfire.span(
            "subreddit_service.create_subreddit", name=name, creator_id=creator_id
        ):
            problem = await self.check_name(name)
            if problem is not None:
                logfire.warn("Subreddit name rejected", name=name, reason=problem)
                raise BusinessRuleViolationError("name", problem)

            now = datetime.now()
            subreddit = Subreddit(
                id=SubredditId(uuid4()),
                name=name,
                description=description,
                creator_id=creator_id,
                subscriber_count=0,
                created_at=now,
                updated_at=now,
            )
            try:
                await self.subreddit_repository.save(subreddit)
            except IntegrityError as e:
                logfire.warn("Subreddit name taken concurrently", name=name)
                raise BusinessRuleViolationError(
                    "name", "This community name is already taken"
                ) from e
            await self.subreddit_repository.add_subscriber(subreddit.id, creator_id)

            created = await self.subreddit_repository.find_by_id(subreddit.id)
            logfire.info("Subreddit created", subreddit_id=str(subreddit.id), name=name)
            return created or subreddit.model_copy(update={"subscriber_count": 1})

    async def get_subreddit(self, subreddit_id: SubredditId) -> Subreddit:
        """Get a community by ID.

        Raises:
            NotFoundError: If the community does not exist
        """
        subreddit = await self.subreddit_repository.find_by_id(subreddit_id)
        if subreddit is None:
            raise NotFoundError("Subreddit", str(subreddit_id))
        return subreddit

    async def subscribe(self, subreddit_id: SubredditId, user_id: UserId) -> bool:
        """Subscribe a user to a known community.

        Returns:
            True if a new subscription was recorded, False for repeats and
            unknown communities
        """
        if await self.subreddit_repository.find_by_id(subreddit_id) is None:
            logfire.info("Subscribe to unknown subreddit", subreddit_id=str(subreddit_id))
            return False
        added = await self.subreddit_repository.add_subscriber(subreddit_id, user_id)
        logfire.info(
            "Subscribe", subreddit_id=str(subreddit_id), user_id=user_id, added=added
        )
        return added

    async def unsubscribe(self, subreddit_id: SubredditId, user_id: UserId) -> bool:
        """Unsubscribe a user; unknown subscriptions are no-ops."""
        removed = await self.subreddit_repository.remove_subscriber(
            subreddit_id, user_id
        )
        logfire.info(
            "Unsubscribe",
            subreddit_id=str(subreddit_id),
            user_id=user_id,
            removed=removed,
        )
        return removed
