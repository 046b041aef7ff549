"""Search use cases."""

from .search import (
    SearchFilters,
    SearchRequest,
    SearchResponse,
    SearchResult,
    SearchUseCase,
)

__all__ = [
    "SearchFilters",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "SearchUseCase",
]
