"""Integration tests for the PostgreSQL repositories.

Requires a database at DATABASE__URL with the schema from
scripts/create_schema.py.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from agora.domain.model.subreddit import Subreddit
from agora.domain.model.vote import Vote
from agora.domain.repository import PostRepository, SubredditRepository, VoteRepository
from agora.domain.value import SubredditId, UserId, VoteId, VoteTarget, VoteType
from tests.conftest import make_post
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("DATABASE__URL"), reason="DATABASE__URL is not set"
    ),
]

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresVoteRepository:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_save_upserts_on_user_and_target(self, integration_env):
        """Saving a second vote on the same target should replace the first."""
        # Arrange
        repo = await integration_env.get(VoteRepository)
        user_id = UserId(f"user-{uuid4()}")
        target_id = uuid4()

        def vote(vote_type):
            return Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                target_type=VoteTarget.COMMENT,
                target_id=target_id,
                vote_type=vote_type,
            )

        # Act
        await repo.save(vote(VoteType.UPVOTE))
        await repo.save(vote(VoteType.DOWNVOTE))

        # Assert
        stored = await repo.find_by_user_and_target(
            user_id, VoteTarget.COMMENT, target_id
        )
        assert stored.vote_type == VoteType.DOWNVOTE
        assert len(await repo.find_by_user(user_id)) == 1
        assert await repo.delete(stored.id) is True
        assert await repo.delete(stored.id) is False


class TestPostgresPostRepository:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_adjust_votes_clamps_at_zero(self, integration_env):
        """Tallies should never drop below zero."""
        # Arrange
        repo = await integration_env.get(PostRepository)
        post = await repo.save(make_post(title=f"clamp {uuid4()}"))

        # Act
        await repo.adjust_votes(post.id, -1, 1)

        # Assert
        updated = await repo.find_by_id(post.id)
        assert updated.upvotes == 0
        assert updated.downvotes == 1
        assert updated.score == -1


class TestPostgresSubredditRepository:
    """Integration tests for PostgresSubredditRepository."""

    @pytest.mark.asyncio
    async def test_subscriptions_are_counted_once(self, integration_env):
        """Repeat subscriptions should be ignored by the unique constraint."""
        # Arrange
        repo = await integration_env.get(SubredditRepository)
        name = f"s{uuid4().hex[:12]}"
        subreddit = await repo.save(
            Subreddit(
                id=SubredditId(uuid4()),
                name=name,
                creator_id=UserId("alice"),
                subscriber_count=0,
            )
        )

        # Act
        first = await repo.add_subscriber(subreddit.id, UserId("bob"))
        second = await repo.add_subscriber(subreddit.id, UserId("bob"))

        # Assert
        assert (first, second) == (True, False)
        found = await repo.find_by_name(name.upper())
        assert found.subscriber_count == 1


class TestPostgresDuplicateGuards:
    """Integration tests for unique constraints on first votes and names."""

    @pytest.mark.asyncio
    async def test_second_first_vote_is_rejected_and_session_survives(
        self, integration_env
    ):
        """A duplicate add should raise and leave the transaction usable."""
        # Arrange
        repo = await integration_env.get(VoteRepository)
        user_id = UserId(f"user-{uuid4()}")
        target_id = uuid4()

        def vote():
            return Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                target_type=VoteTarget.POST,
                target_id=target_id,
                vote_type=VoteType.UPVOTE,
            )

        await repo.add(vote())

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.add(vote())
        stored = await repo.find_by_user_and_target(
            user_id, VoteTarget.POST, target_id, for_update=True
        )
        assert stored.vote_type == VoteType.UPVOTE

    @pytest.mark.asyncio
    async def test_case_insensitive_name_clash_is_rejected(self, integration_env):
        """Saving a second community whose name differs only in case should raise."""
        # Arrange
        repo = await integration_env.get(SubredditRepository)
        name = f"s{uuid4().hex[:12]}"
        await repo.save(
            Subreddit(id=SubredditId(uuid4()), name=name, creator_id=UserId("alice"))
        )

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save(
                Subreddit(
                    id=SubredditId(uuid4()), name=name.upper(), creator_id=UserId("bob")
                )
            )
        assert (await repo.find_by_name(name)).creator_id == UserId("alice")
