"""Notification domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.model.notification import Notification
from agora.domain.repository import NotificationRepository
from agora.domain.value import NotificationId, NotificationType, UserId

from .base import Service


class NotificationService(Service):
    """Domain service for user notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        self.notification_repository = notification_repository

    async def notify(
        self, user_id: UserId, type: NotificationType, message: str
    ) -> Notification:
        """Deliver a notification to a user.

        Args:
            user_id: Recipient
            type: Kind of notification
            message: Human readable text

        Returns:
            The stored notification
        """
        notification = Notification(
            id=NotificationId(uuid4()),
            user_id=user_id,
            type=type,
            message=message,
            created_at=datetime.now(),
        )
        logfire.info(
            "Notification created", user_id=user_id, notification_type=type.value
        )
        return await self.notification_repository.save(notification)

    async def list_for_user(self, user_id: UserId) -> list[Notification]:
        """List a user's notifications, newest first."""
        return await self.notification_repository.find_by_user(user_id)

    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Mark a notification as read.

        Returns:
            True if the user's notification was found and marked
        """
        marked = await self.notification_repository.mark_read(notification_id, user_id)
        if not marked:
            logfire.info(
                "No notification to mark read",
                notification_id=str(notification_id),
                user_id=user_id,
            )
        return marked
