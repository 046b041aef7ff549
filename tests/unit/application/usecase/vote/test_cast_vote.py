"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from agora.domain.value import VoteChoice, VoteTarget, VoteType
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_switch_reports_double_delta(self, unit_env):
        """Switching an upvote to a downvote should report -2."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        target_id = uuid4()

        def request(vote_type):
            return CastVoteRequest(
                target_id=target_id,
                target_type=VoteTarget.POST,
                vote_type=vote_type,
                user_id="alice",
            )

        await use_case.execute(request(VoteType.UPVOTE))

        # Act
        response = await use_case.execute(request(VoteType.DOWNVOTE))

        # Assert
        assert response.current_vote == VoteChoice.DOWNVOTE
        assert response.delta == -2
        assert response.vote.vote_type == VoteType.DOWNVOTE
        assert response.vote.user_id == "alice"
