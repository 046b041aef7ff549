"""Notification routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header
from fastapi.responses import JSONResponse

from agora.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadUseCase,
)
from agora.interface.api.envelope import respond, respond_to_validation
from agora.interface.validation import validate

router = APIRouter(
    prefix="/api/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("")
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    x_user_id: str | None = Header(default=None),
) -> JSONResponse:
    """List the calling user's notifications; empty without x-user-id."""
    request = ListNotificationsRequest(user_id=x_user_id)
    return await respond(lambda: list_notifications_use_case.execute(request))


@router.post("/mark-read")
async def mark_read(
    mark_read_use_case: FromDishka[MarkReadUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Mark one notification as read."""
    return await respond_to_validation(
        validate(MarkReadRequest, payload), mark_read_use_case.execute
    )
