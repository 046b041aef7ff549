"""Remove comment use case."""

from pydantic import Field

from agora.application.usecase.dto import WireModel
from agora.domain.service import ModerationService
from agora.domain.value import UserId


class RemoveCommentRequest(WireModel):
    """Remove comment request."""

    comment_id: str = Field(min_length=1)
    moderator_id: str = Field(min_length=1)
    reason: str | None = Field(default=None, max_length=500)


class RemoveCommentResponse(WireModel):
    """Remove comment response."""

    success: bool
    comment_id: str
    moderator_id: str


class RemoveCommentUseCase:
    """Use case for a moderator removing a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: RemoveCommentRequest) -> RemoveCommentResponse:
        await self.moderation_service.remove_comment(
            request.comment_id, UserId(request.moderator_id), request.reason
        )
        return RemoveCommentResponse(
            success=True,
            comment_id=request.comment_id,
            moderator_id=request.moderator_id,
        )
