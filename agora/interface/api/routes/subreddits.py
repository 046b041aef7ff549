"""Subreddit routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from agora.application.usecase.subreddit import (
    CheckNameRequest,
    CheckNameUseCase,
    CreateSubredditRequest,
    CreateSubredditUseCase,
    GetSubredditRequest,
    GetSubredditUseCase,
    SubscribeUseCase,
    SubscriptionRequest,
    UnsubscribeUseCase,
)
from agora.interface.api.envelope import respond, respond_to_validation
from agora.interface.error import MissingParameterError
from agora.interface.validation import validate

router = APIRouter(
    prefix="/api/subreddits", tags=["subreddits"], route_class=DishkaRoute
)


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_subreddit(
    create_subreddit_use_case: FromDishka[CreateSubredditUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Create a community.

    Reserved and already-taken names are reported as issues on name.
    """
    return await respond_to_validation(
        validate(CreateSubredditRequest, payload),
        create_subreddit_use_case.execute,
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/check-name")
async def check_name(
    check_name_use_case: FromDishka[CheckNameUseCase],
    name: str | None = None,
) -> JSONResponse:
    """Check whether a community name is still available.

    Raises:
        MissingParameterError: If name is not supplied
    """
    if not name:
        raise MissingParameterError("Name parameter is required")

    request = CheckNameRequest(name=name)
    return await respond(
        lambda: check_name_use_case.execute(request), exclude_none=True
    )


@router.post("/subscribe")
async def subscribe(
    subscribe_use_case: FromDishka[SubscribeUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Subscribe a user to a community."""
    return await respond_to_validation(
        validate(SubscriptionRequest, payload), subscribe_use_case.execute
    )


@router.post("/unsubscribe")
async def unsubscribe(
    unsubscribe_use_case: FromDishka[UnsubscribeUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Unsubscribe a user from a community."""
    return await respond_to_validation(
        validate(SubscriptionRequest, payload), unsubscribe_use_case.execute
    )


@router.get("/{subreddit_id}")
async def get_subreddit(
    subreddit_id: str,
    get_subreddit_use_case: FromDishka[GetSubredditUseCase],
) -> JSONResponse:
    """Get a community by ID."""
    request = GetSubredditRequest(subreddit_id=subreddit_id)
    return await respond(lambda: get_subreddit_use_case.execute(request))
