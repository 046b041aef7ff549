"""Ban and mute user use cases."""

from datetime import datetime

from pydantic import Field

from agora.application.usecase.dto import WireModel
from agora.domain.service import ModerationService
from agora.domain.value import ModerationKind, UserId


class RestrictUserRequest(WireModel):
    """Ban or mute request."""

    user_id: str = Field(min_length=1)
    moderator_id: str = Field(min_length=1)
    reason: str = Field(min_length=1, max_length=500)
    expires_at: datetime | None = None
    is_permanent: bool = False


class RestrictUserResponse(RestrictUserRequest):
    """Ban or mute response, echoing the request."""

    success: bool


class _RestrictUserUseCase:
    kind: ModerationKind

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: RestrictUserRequest) -> RestrictUserResponse:
        await self.moderation_service.restrict_user(
            self.kind,
            user_id=UserId(request.user_id),
            moderator_id=UserId(request.moderator_id),
            reason=request.reason,
            expires_at=request.expires_at,
            is_permanent=request.is_permanent,
        )
        return RestrictUserResponse(success=True, **request.model_dump())


class BanUserUseCase(_RestrictUserUseCase):
    """Use case for banning a user."""

    kind = ModerationKind.BAN


class MuteUserUseCase(_RestrictUserUseCase):
    """Use case for muting a user."""

    kind = ModerationKind.MUTE
