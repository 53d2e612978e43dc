"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from commentfield.config import CommentFieldSettings, Settings
from commentfield.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_field_settings(self, settings: Settings) -> CommentFieldSettings:
        """Provide the comments field configuration."""
        return settings.comments
