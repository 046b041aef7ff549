"""Mark notification read use case."""

from uuid import UUID

from pydantic import Field

from agora.application.usecase.dto import WireModel
from agora.domain.service import NotificationService
from agora.domain.value import NotificationId, UserId


class MarkReadRequest(WireModel):
    """Mark read request."""

    notification_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


class MarkReadResponse(MarkReadRequest):
    """Mark read response.

    Marking is idempotent, so success only means the request was accepted.
    """

    success: bool


class MarkReadUseCase:
    """Use case for marking a notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        try:
            notification_id = NotificationId(UUID(request.notification_id))
        except ValueError:
            notification_id = None

        if notification_id is not None:
            await self.notification_service.mark_read(
                notification_id, UserId(request.user_id)
            )
        return MarkReadResponse(success=True, **request.model_dump())
