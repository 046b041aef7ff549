"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import and_, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Notification
from agora.domain.repository import NotificationRepository
from agora.domain.value import NotificationId, UserId
from agora.persistence.mappers import notification_to_dict, row_to_notification
from agora.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user(self, user_id: UserId) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        notification_dict = notification_to_dict(notification)
        stmt = select(notifications_table.c.id).where(
            notifications_table.c.id == notification.id
        )
        existing = (await self.session.execute(stmt)).fetchone()

        if existing:
            write = (
                notifications_table.update()
                .where(notifications_table.c.id == notification.id)
                .values(**notification_dict)
            )
        else:
            write = notifications_table.insert().values(**notification_dict)
        await self.session.execute(write)
        await self.session.flush()
        return notification

    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Mark a notification as read."""
        stmt = (
            notifications_table.update()
            .where(
                and_(
                    notifications_table.c.id == notification_id,
                    notifications_table.c.user_id == user_id,
                )
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
