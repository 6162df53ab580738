"""Domain layer DI providers."""

from dishka import Scope, provide

from camp.config import FeedSettings, GatewaySettings, LocalStoreSettings, VotingSettings
from camp.domain.repository import LocalStore, RemoteStore
from camp.domain.service import (
    ContentService,
    MealService,
    PackingService,
    PersistenceGateway,
    VoteService,
)
from camp.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Stores are APP-scoped and hold no request state, so services are cheap
    REQUEST-scoped wrappers around them. The gateway is APP-scoped: its
    per-resource failover flags must live as long as the process.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_persistence_gateway(
        self,
        remote_store: RemoteStore,
        local_store: LocalStore,
        gateway_settings: GatewaySettings,
        local_settings: LocalStoreSettings,
    ) -> PersistenceGateway:
        """Provide the process-wide persistence gateway."""
        return PersistenceGateway(
            remote_store=remote_store,
            local_store=local_store,
            gateway=gateway_settings,
            local=local_settings,
        )

    @provide
    def get_vote_service(
        self, remote_store: RemoteStore, voting: VotingSettings
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(remote_store=remote_store, voting=voting)

    @provide
    def get_content_service(
        self, remote_store: RemoteStore, voting: VotingSettings, feed: FeedSettings
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(remote_store=remote_store, voting=voting, feed=feed)

    @provide
    def get_packing_service(self, gateway: PersistenceGateway) -> PackingService:
        """Provide packing list domain service."""
        return PackingService(gateway=gateway)

    @provide
    def get_meal_service(self, gateway: PersistenceGateway) -> MealService:
        """Provide meal plan domain service."""
        return MealService(gateway=gateway)
