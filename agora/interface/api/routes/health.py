"""Liveness endpoint."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from agora.application.usecase.dto import WireModel
from agora.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

API_VERSION = "0.1.0"


class HealthResponse(WireModel):
    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    persistence: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report build info and which store backs this process."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=API_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
        persistence="postgres" if settings.uses_database else "memory",
    )
