"""Search routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from agora.application.usecase.search import SearchRequest, SearchUseCase
from agora.interface.api.envelope import respond_to_validation
from agora.interface.validation import validate

router = APIRouter(prefix="/api/search", tags=["search"], route_class=DishkaRoute)


@router.post("")
async def search(
    search_use_case: FromDishka[SearchUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Search posts and comments.

    Args:
        search_use_case: Search use case from DI
        payload: {query, type?, filters?: {subreddit, author, dateRange, sortBy}}

    Returns:
        results, total, and the query and filters echoed back
    """
    return await respond_to_validation(
        validate(SearchRequest, payload), search_use_case.execute, exclude_none=True
    )
