"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from agora.domain.model.notification import Notification
from agora.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Notification]:
        """Find a user's notifications, newest first."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Mark one of a user's notifications as read.

        Args:
            notification_id: Notification to mark
            user_id: Owner of the notification

        Returns:
            True if the notification exists and belongs to the user
        """
        pass
