"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agora.config import Settings
from agora.interface.api.error_handlers import register_error_handlers
from agora.interface.api.routes import (
    analytics,
    comments,
    health,
    moderation,
    notifications,
    posts,
    realtime,
    search,
    subreddits,
    users,
    votes,
)
from agora.util.di.container import create_container, setup_di
from agora.util.observability import instrument_fastapi


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings to build the app with, loaded from the environment
            when omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Agora API",
        description="Backend API for Agora - communities, posts, threaded comments, voting and moderation",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
            "X-User-Id",
        ],
        expose_headers=["Content-Length", "Content-Type", "Cache-Control"],
        max_age=600,
    )

    container = create_container(settings)
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(subreddits.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(moderation.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(users.router)
    app_instance.include_router(search.router)
    app_instance.include_router(analytics.router)
    app_instance.include_router(realtime.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
