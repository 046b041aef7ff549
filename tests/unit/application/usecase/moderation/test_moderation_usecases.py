"""Unit tests for the moderation use cases."""

import pytest

from agora.application.usecase.moderation import (
    BanUserUseCase,
    FlagRequest,
    FlagUseCase,
    MuteUserUseCase,
    RestrictUserRequest,
)
from agora.domain.repository import ModerationRepository
from agora.domain.value import ModerationKind, VoteTarget
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestModerationUseCases:
    """Tests for flag, ban and mute."""

    @pytest.mark.asyncio
    async def test_flag_echoes_request(self, unit_env):
        """The flag response should carry the request fields and success."""
        # Arrange
        use_case = await unit_env.get(FlagUseCase)
        request = FlagRequest(
            target_id="id", target_type=VoteTarget.COMMENT, user_id="u", reason="Spam"
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.success is True
        assert response.target_type == VoteTarget.COMMENT
        assert response.reason == "Spam"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("use_case_type", "kind"),
        [(BanUserUseCase, ModerationKind.BAN), (MuteUserUseCase, ModerationKind.MUTE)],
    )
    async def test_restrictions_record_their_kind(self, unit_env, use_case_type, kind):
        """Ban and mute should each be logged under their own kind."""
        # Arrange
        use_case = await unit_env.get(use_case_type)
        repo = await unit_env.get(ModerationRepository)

        # Act
        response = await use_case.execute(
            RestrictUserRequest(user_id="troll", moderator_id="mod", reason="Abuse")
        )

        # Assert
        assert response.success is True
        assert len(await repo.find_by_target(kind, "troll")) == 1
