"""Demo data for local development."""

from datetime import datetime
from uuid import UUID

import logfire

from agora.domain.model.subreddit import Subreddit
from agora.domain.model.user import User
from agora.domain.repository import SubredditRepository, UserRepository
from agora.domain.value import SubredditId, UserId

DEMO_USER_ID = UserId("user-123")
DEMO_SUBREDDIT_ID = SubredditId(UUID("00000000-0000-4000-8000-000000000001"))

_SEEDED_AT = datetime(2024, 1, 1)


async def seed_demo_user(user_repository: UserRepository) -> None:
    """Store the demo user unless it already exists."""
    if await user_repository.find_by_id(DEMO_USER_ID) is not None:
        return
    await user_repository.save(
        User(
            id=DEMO_USER_ID,
            username="testuser",
            email="test@example.com",
            karma=42,
            created_at=_SEEDED_AT,
            updated_at=_SEEDED_AT,
        )
    )
    logfire.info("Demo user seeded", user_id=DEMO_USER_ID)


async def seed_demo_subreddit(subreddit_repository: SubredditRepository) -> None:
    """Store the demo community, with the demo user subscribed."""
    if await subreddit_repository.find_by_id(DEMO_SUBREDDIT_ID) is not None:
        return
    await subreddit_repository.save(
        Subreddit(
            id=DEMO_SUBREDDIT_ID,
            name="testsubreddit",
            description="A test subreddit",
            creator_id=DEMO_USER_ID,
            subscriber_count=0,
            created_at=_SEEDED_AT,
            updated_at=_SEEDED_AT,
        )
    )
    await subreddit_repository.add_subscriber(DEMO_SUBREDDIT_ID, DEMO_USER_ID)
    logfire.info("Demo subreddit seeded", subreddit_id=str(DEMO_SUBREDDIT_ID))
