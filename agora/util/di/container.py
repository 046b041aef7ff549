"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
import logfire

from agora.config import Settings
from agora.util.di import PROVIDERS, ProdConfigProvider, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the application container.

    Persistence is backed by PostgreSQL when a database URL is configured and
    by in-memory repositories otherwise.

    Args:
        settings: Settings to serve instead of loading them from the environment

    Returns:
        Configured DI container
    """
    settings = settings or Settings()
    use_memory = not settings.uses_database

    provider_instances = [
        ProdConfigProvider(settings)
        if base is ProdConfigProvider
        else get_provider(base, use_mock=use_memory)()
        for base in PROVIDERS
    ]

    logfire.info("Container created", in_memory=use_memory)
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
