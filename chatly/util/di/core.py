"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from chatly.config import NotionSettings, Settings
from chatly.util.di.base import ProviderBase
from chatly.util.retry import RetryPolicy


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_notion_settings(self, settings: Settings) -> NotionSettings:
        """Provide Notion settings."""
        return settings.notion

    @provide(scope=Scope.APP)
    def provide_retry_policy(self, settings: Settings) -> RetryPolicy:
        """Provide retry policy for remote store calls."""
        return settings.retry
