"""Search use case."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from agora.application.usecase.dto import WireModel
from agora.domain.model import Post
from agora.domain.service import SearchHit, SearchService
from agora.domain.value import DateRange, SearchScope, SearchSort


class SearchFilters(WireModel):
    """Optional search filters."""

    subreddit: str | None = None
    author: str | None = None
    date_range: DateRange | None = None
    sort_by: SearchSort | None = None


class SearchRequest(WireModel):
    """Search request."""

    query: str = Field(min_length=1)
    type: SearchScope = SearchScope.ALL
    filters: SearchFilters | None = None


class SearchResult(WireModel):
    """One matching post or comment; fields that do not apply are omitted."""

    id: UUID
    type: Literal["post", "comment"]
    title: str | None = None
    content: str
    author_id: str
    subreddit_id: UUID | None = None
    post_id: UUID | None = None
    score: int
    created_at: datetime


class SearchResponse(WireModel):
    """Search response, serialized without unset fields."""

    results: list[SearchResult]
    total: int
    query: str
    filters: SearchFilters | None = None


def _to_result(hit: SearchHit) -> SearchResult:
    if isinstance(hit, Post):
        return SearchResult(
            id=hit.id,
            type="post",
            title=hit.title,
            content=hit.content,
            author_id=hit.author_id,
            subreddit_id=hit.subreddit_id,
            score=hit.score,
            created_at=hit.created_at,
        )
    return SearchResult(
        id=hit.id,
        type="comment",
        content=hit.content,
        author_id=hit.author_id,
        post_id=hit.post_id,
        score=hit.score,
        created_at=hit.created_at,
    )


class SearchUseCase:
    """Use case for searching posts and comments."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: SearchRequest) -> SearchResponse:
        filters = request.filters or SearchFilters()
        hits = await self.search_service.search(
            request.query,
            scope=request.type,
            subreddit=filters.subreddit,
            author=filters.author,
            date_range=filters.date_range,
            sort_by=filters.sort_by,
        )
        results = [_to_result(hit) for hit in hits]
        return SearchResponse(
            results=results,
            total=len(results),
            query=request.query,
            filters=request.filters,
        )
