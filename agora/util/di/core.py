"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from agora.config import Settings
from agora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and .env file unless an
    instance is handed in, which is how tests pin their configuration.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self._settings if self._settings is not None else Settings()
