"""Publishes realtime events for mutations made through the REST API."""

from functools import partial
from typing import Any

from stories.adapter.realtime.broadcaster import RoomBroadcaster
from stories.adapter.realtime.events import ServerEvent
from stories.config import RealtimeSettings
from stories.domain.repository import UnitOfWork


class EventPublisher:
    """Turns successful REST mutations into realtime events.

    Events are queued on the request's unit of work and delivered only after
    it commits, so subscribers never hear about a write that rolled back and
    a reload triggered by the event sees the new state.

    Payloads are the REST response bodies (JSON mode) and always carry the
    ``testimonial_id`` the event belongs to. Publishing is a no-op when
    ``publish_from_api`` is disabled.
    """

    def __init__(
        self,
        broadcaster: RoomBroadcaster,
        unit_of_work: UnitOfWork,
        settings: RealtimeSettings,
    ) -> None:
        self.broadcaster = broadcaster
        self.unit_of_work = unit_of_work
        self.enabled = settings.publish_from_api

    def testimonial_created(self, testimonial: dict[str, Any]) -> None:
        self._to_everyone(
            ServerEvent.TESTIMONIAL_CREATED,
            {**testimonial, "testimonial_id": testimonial["id"]},
        )

    def testimonial_deleted(self, testimonial_id: str) -> None:
        self._to_everyone(
            ServerEvent.TESTIMONIAL_DELETED, {"testimonial_id": testimonial_id}
        )

    def testimonial_like_updated(self, result: dict[str, Any]) -> None:
        self._to_room(ServerEvent.TESTIMONIAL_LIKE_UPDATE, result)

    def comment_created(self, comment: dict[str, Any]) -> None:
        self._to_room(ServerEvent.COMMENT_CREATED, comment)

    def comment_like_updated(self, result: dict[str, Any]) -> None:
        self._to_room(ServerEvent.COMMENT_LIKE_UPDATE, result)

    def comment_deleted(self, deletion: dict[str, Any]) -> None:
        self._to_room(ServerEvent.COMMENT_DELETED, deletion)

    def _to_everyone(self, event: ServerEvent, data: dict[str, Any]) -> None:
        if self.enabled:
            self.unit_of_work.after_commit(
                partial(self.broadcaster.broadcast, event, data)
            )

    def _to_room(self, event: ServerEvent, data: dict[str, Any]) -> None:
        if self.enabled:
            self.unit_of_work.after_commit(
                partial(
                    self.broadcaster.emit_to_room,
                    data["testimonial_id"],
                    event,
                    data,
                )
            )
