"""List notifications use case."""

from agora.application.usecase.dto import NotificationItem, WireModel
from agora.domain.service import NotificationService
from agora.domain.value import UserId


class ListNotificationsRequest(WireModel):
    """List notifications request; no user means no notifications."""

    user_id: str | None = None


class ListNotificationsResponse(WireModel):
    """List notifications response."""

    notifications: list[NotificationItem]


class ListNotificationsUseCase:
    """Use case for reading a user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        if not request.user_id:
            return ListNotificationsResponse(notifications=[])

        notifications = await self.notification_service.list_for_user(
            UserId(request.user_id)
        )
        return ListNotificationsResponse(
            notifications=[NotificationItem.model_validate(n) for n in notifications]
        )
