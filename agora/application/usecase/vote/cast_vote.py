"""Cast vote use case."""

from uuid import UUID

from pydantic import Field

from agora.application.usecase.dto import VoteItem, WireModel
from agora.domain.service import VoteService
from agora.domain.value import UserId, VoteChoice, VoteTarget, VoteType


class CastVoteRequest(WireModel):
    """Cast vote request."""

    target_id: UUID
    target_type: VoteTarget
    vote_type: VoteType
    user_id: str = Field(default="anonymous", min_length=1)


class CastVoteResponse(WireModel):
    """Cast vote response.

    vote echoes the request; current_vote is the user's standing vote
    afterwards and delta the resulting score change.
    """

    vote: VoteItem
    current_vote: VoteChoice
    delta: int


class CastVoteUseCase:
    """Use case for voting on a post or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Validated vote

        Returns:
            The vote and the transition it caused
        """
        vote, step = await self.vote_service.cast_vote(
            user_id=UserId(request.user_id),
            target_type=request.target_type,
            target_id=request.target_id,
            vote_type=request.vote_type,
        )
        return CastVoteResponse(
            vote=VoteItem.model_validate(vote),
            current_vote=step.next,
            delta=step.delta,
        )
