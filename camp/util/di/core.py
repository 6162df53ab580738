"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from camp.config import (
    FeedSettings,
    GatewaySettings,
    LocalStoreSettings,
    Settings,
    VotingSettings,
)
from camp.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        return settings.voting

    @provide
    def provide_gateway_settings(self, settings: Settings) -> GatewaySettings:
        return settings.gateway

    @provide
    def provide_local_store_settings(self, settings: Settings) -> LocalStoreSettings:
        return settings.local_store

    @provide
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        return settings.feed
