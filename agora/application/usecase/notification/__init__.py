"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .mark_read import MarkReadRequest, MarkReadResponse, MarkReadUseCase

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
]
