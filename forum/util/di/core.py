"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import PathSettings, Settings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider.

    Settings are read once per container from the environment and ``.env``.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_path_settings(self, settings: Settings) -> PathSettings:
        """Provide materialized path settings."""
        return settings.paths
