"""Vote domain service.

Keeps the vote ledger (one vote per user and target) and the denormalised
upvote/downvote tallies on posts and comments in step, using the same
transition table as the client-side optimistic vote.
"""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.model.vote import Vote
from agora.domain.repository import CommentRepository, PostRepository, VoteRepository
from agora.domain.value import (
    CommentId,
    PostId,
    UserId,
    VoteChoice,
    VoteId,
    VoteTarget,
    VoteType,
)

from .base import Service
from .vote_state import VoteTransition, transition


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_repository: Post repository, for tallies
            comment_repository: Comment repository, for tallies
        """
        self.vote_repository = vote_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def cast_vote(
        self,
        user_id: UserId,
        target_type: VoteTarget,
        target_id: UUID,
        vote_type: VoteType,
    ) -> tuple[Vote, VoteTransition]:
        """Cast, switch or withdraw a vote.

        Repeating the standing vote withdraws it, the opposite vote replaces
        it. Targets the service has never seen are accepted; only the
        tallies of known targets are adjusted.

        Args:
            user_id: Voting user
            target_type: Post or comment
            target_id: ID of the voted item
            vote_type: Requested vote

        Returns:
            The vote as requested, and the transition it caused
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=user_id,
            target_type=target_type.value,
            target_id=str(target_id),
            vote_type=vote_type.value,
        ):
            try:
                vote, step = await self._record(
                    user_id, target_type, target_id, vote_type
                )
            except IntegrityError:
                # Another request recorded the first vote in the meantime;
                # apply this one on top of it.
                logfire.warn(
                    "Concurrent first vote", user_id=user_id, target_id=str(target_id)
                )
                vote, step = await self._record(
                    user_id, target_type, target_id, vote_type
                )

            await self._adjust_tallies(target_type, target_id, step)
            return vote, step

    async def _record(
        self,
        user_id: UserId,
        target_type: VoteTarget,
        target_id: UUID,
        vote_type: VoteType,
    ) -> tuple[Vote, VoteTransition]:
        existing = await self.vote_repository.find_by_user_and_target(
            user_id, target_type, target_id, for_update=True
        )
        step = transition(
            VoteChoice.of(existing.vote_type if existing else None), vote_type
        )

        vote = Vote(
            id=VoteId(uuid4()),
            user_id=user_id,
            target_type=target_type,
            target_id=target_id,
            vote_type=vote_type,
            created_at=datetime.now(),
        )

        if step.next is VoteChoice.NONE:
            if existing:
                await self.vote_repository.delete(existing.id)
            logfire.info("Vote withdrawn", target_id=str(target_id))
        else:
            if existing is None:
                # Raises IntegrityError if a concurrent request got there first
                await self.vote_repository.add(vote)
            else:
                await self.vote_repository.save(vote)
            logfire.info(
                "Vote recorded",
                target_id=str(target_id),
                previous=step.previous.value,
                current=step.next.value,
            )
        return vote, step

    async def _adjust_tallies(
        self, target_type: VoteTarget, target_id: UUID, step: VoteTransition
    ) -> None:
        if step.upvote_delta == 0 and step.downvote_delta == 0:
            return

        if target_type == VoteTarget.POST:
            post_id = PostId(target_id)
            if await self.post_repository.find_by_id(post_id) is None:
                logfire.debug("Vote on unknown post", post_id=str(target_id))
                return
            await self.post_repository.adjust_votes(
                post_id, step.upvote_delta, step.downvote_delta
            )
        else:  # VoteTarget.COMMENT
            comment_id = CommentId(target_id)
            if await self.comment_repository.find_by_id(comment_id) is None:
                logfire.debug("Vote on unknown comment", comment_id=str(target_id))
                return
            await self.comment_repository.adjust_votes(
                comment_id, step.upvote_delta, step.downvote_delta
            )
