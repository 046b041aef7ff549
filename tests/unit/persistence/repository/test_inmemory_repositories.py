"""Unit tests for in-memory repository behaviour the services rely on."""

from uuid import uuid4

import pytest

from agora.domain.model.notification import Notification
from agora.domain.model.subreddit import Subreddit
from agora.domain.model.vote import Vote
from agora.domain.value import (
    NotificationId,
    NotificationType,
    SubredditId,
    UserId,
    VoteId,
    VoteTarget,
    VoteType,
)
from agora.persistence.repository.inmemory import (
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemorySubredditRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_post


class TestInMemoryVoteRepository:
    """Tests for the one-vote-per-target ledger."""

    @pytest.mark.asyncio
    async def test_save_replaces_vote_on_same_target(self):
        """A second vote by the same user on a target should replace the first."""
        # Arrange
        repo = InMemoryVoteRepository()
        target_id = uuid4()

        def vote(vote_type):
            return Vote(
                id=VoteId(uuid4()),
                user_id=UserId("alice"),
                target_type=VoteTarget.POST,
                target_id=target_id,
                vote_type=vote_type,
            )

        # Act
        await repo.save(vote(VoteType.UPVOTE))
        await repo.save(vote(VoteType.DOWNVOTE))

        # Assert
        votes = await repo.find_by_user(UserId("alice"))
        assert len(votes) == 1
        assert votes[0].vote_type == VoteType.DOWNVOTE

    @pytest.mark.asyncio
    async def test_delete_unknown_vote_returns_false(self):
        """Deleting a vote that does not exist should report False."""
        # Act
        deleted = await InMemoryVoteRepository().delete(VoteId(uuid4()))

        # Assert
        assert deleted is False


class TestInMemoryPostRepository:
    """Tests for tally bookkeeping on posts."""

    @pytest.mark.asyncio
    async def test_adjust_votes_never_goes_negative(self):
        """Tallies should be clamped at zero."""
        # Arrange
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())

        # Act
        await repo.adjust_votes(post.id, -1, 2)

        # Assert
        updated = await repo.find_by_id(post.id)
        assert updated.upvotes == 0
        assert updated.downvotes == 2

    @pytest.mark.asyncio
    async def test_increment_comment_count(self):
        """Each new comment should bump the post's counter."""
        # Arrange
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())

        # Act
        await repo.increment_comment_count(post.id)
        await repo.increment_comment_count(post.id)

        # Assert
        assert (await repo.find_by_id(post.id)).comment_count == 2


class TestInMemorySubredditRepository:
    """Tests for subscriptions and ranking."""

    @pytest.mark.asyncio
    async def test_find_top_orders_by_subscribers(self):
        """The largest community should come first."""
        # Arrange
        repo = InMemorySubredditRepository()
        small = await repo.save(
            Subreddit(
                id=SubredditId(uuid4()),
                name="small",
                creator_id=UserId("alice"),
                subscriber_count=0,
            )
        )
        big = await repo.save(
            Subreddit(
                id=SubredditId(uuid4()),
                name="big",
                creator_id=UserId("alice"),
                subscriber_count=0,
            )
        )
        for user in ("a", "b"):
            await repo.add_subscriber(big.id, UserId(user))

        # Act
        top = await repo.find_top()

        # Assert
        assert [s.id for s in top] == [big.id, small.id]
        assert top[0].subscriber_count == 2

    @pytest.mark.asyncio
    async def test_find_by_name_ignores_case(self):
        """Names should match regardless of case."""
        # Arrange
        repo = InMemorySubredditRepository()
        saved = await repo.save(
            Subreddit(id=SubredditId(uuid4()), name="Python", creator_id=UserId("a"))
        )

        # Act
        found = await repo.find_by_name("PYTHON")

        # Assert
        assert found.id == saved.id


class TestInMemoryNotificationRepository:
    """Tests for read receipts."""

    @pytest.mark.asyncio
    async def test_mark_read_only_for_recipient(self):
        """Only the recipient should be able to mark a notification read."""
        # Arrange
        repo = InMemoryNotificationRepository()
        notification = await repo.save(
            Notification(
                id=NotificationId(uuid4()),
                user_id=UserId("alice"),
                type=NotificationType.MENTION,
                message="You were mentioned",
            )
        )

        # Act
        by_other = await repo.mark_read(notification.id, UserId("bob"))
        by_owner = await repo.mark_read(notification.id, UserId("alice"))

        # Assert
        assert by_other is False
        assert by_owner is True
        assert (await repo.find_by_user(UserId("alice")))[0].read is True
