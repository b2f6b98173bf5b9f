"""Configuration providers."""

from dishka import Scope, provide

from hackers.config import HackerNewsSettings, Settings
from hackers.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Provides settings, loaded from the environment unless given."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self._settings or Settings()

    @provide(scope=Scope.APP)
    def provide_hackernews_settings(self, settings: Settings) -> HackerNewsSettings:
        return settings.hackernews
