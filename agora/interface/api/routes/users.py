"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from agora.application.usecase.user import (
    GetUserActivityUseCase,
    GetUserRequest,
    GetUserUseCase,
)
from agora.interface.api.envelope import respond

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> JSONResponse:
    """Get a user profile.

    Returns:
        200 with the user, 404 "User not found" for unknown IDs
    """
    request = GetUserRequest(user_id=user_id)
    return await respond(lambda: get_user_use_case.execute(request))


@router.get("/{user_id}/activity")
async def get_user_activity(
    user_id: str,
    get_user_activity_use_case: FromDishka[GetUserActivityUseCase],
) -> JSONResponse:
    """List a user's posts, comments and votes."""
    request = GetUserRequest(user_id=user_id)
    return await respond(lambda: get_user_activity_use_case.execute(request))
