"""Notification entity."""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """A message addressed to a single user."""

    id: NotificationId
    user_id: UserId
    type: NotificationType
    message: str = Field(min_length=1)
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
