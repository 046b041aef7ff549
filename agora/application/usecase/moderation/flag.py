"""Flag content use case."""

from pydantic import Field

from agora.application.usecase.dto import WireModel
from agora.domain.service import ModerationService
from agora.domain.value import UserId, VoteTarget


class FlagRequest(WireModel):
    """Flag request."""

    target_id: str = Field(min_length=1)
    target_type: VoteTarget
    user_id: str = Field(min_length=1)
    reason: str = Field(min_length=3)


class FlagResponse(FlagRequest):
    """Flag response, echoing the report."""

    success: bool


class FlagUseCase:
    """Use case for reporting a post or comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: FlagRequest) -> FlagResponse:
        await self.moderation_service.flag(
            target_id=request.target_id,
            target_type=request.target_type,
            user_id=UserId(request.user_id),
            reason=request.reason,
        )
        return FlagResponse(success=True, **request.model_dump())
