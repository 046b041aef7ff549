"""In-memory notification repository."""

from agora.domain.model.notification import Notification
from agora.domain.repository.notification import NotificationRepository
from agora.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_user(self, user_id: UserId) -> list[Notification]:
        """Find a user's notifications, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.user_id == user_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications

    async def save(self, notification: Notification) -> Notification:
        """Save or update a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Mark a notification as read."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.user_id != user_id:
            return False
        self._notifications[notification_id] = notification.model_copy(
            update={"read": True}
        )
        return True
