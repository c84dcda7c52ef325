"""Adapter DI providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from stories.adapter.realtime import EventPublisher, RoomBroadcaster
from stories.config import RealtimeSettings
from stories.domain.repository import UnitOfWork
from stories.util.di.base import ProviderBase


class ProdRealtimeProvider(ProviderBase):
    """Realtime fan-out provider.

    One broadcaster per process; it is closed when the container closes.
    """

    scope = Scope.APP

    @provide
    async def get_broadcaster(self) -> AsyncIterator[RoomBroadcaster]:
        """Provide the process-wide room broadcaster."""
        broadcaster = RoomBroadcaster()
        yield broadcaster
        await broadcaster.close()

    @provide(scope=Scope.REQUEST)
    def get_event_publisher(
        self,
        broadcaster: RoomBroadcaster,
        unit_of_work: UnitOfWork,
        settings: RealtimeSettings,
    ) -> EventPublisher:
        """Provide the publisher used by REST handlers.

        Events wait for the request's unit of work to commit.
        """
        return EventPublisher(
            broadcaster=broadcaster, unit_of_work=unit_of_work, settings=settings
        )
