"""Room-scoped event broadcaster.

Keeps the registry of live connections and their room memberships for this
process. Delivery is fire and forget: a subscriber that cannot be reached is
dropped, and nothing is queued or replayed.
"""

from collections import defaultdict
from typing import Any, Protocol
from uuid import uuid4

import logfire

from stories.adapter.realtime.events import ServerEvent, room_name


class Subscriber(Protocol):
    """Anything that can receive a JSON message (e.g. a WebSocket)."""

    async def send_json(self, data: Any) -> None: ...


class RoomBroadcaster:
    """Registry of connections and rooms with broadcast helpers."""

    def __init__(self) -> None:
        self._connections: dict[str, Subscriber] = {}
        self._rooms: dict[str, set[str]] = defaultdict(set)
        self._memberships: dict[str, set[str]] = defaultdict(set)

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def members(self, testimonial_id: str) -> set[str]:
        """Connection IDs currently subscribed to a testimonial."""
        return set(self._rooms.get(room_name(testimonial_id), ()))

    def connect(self, subscriber: Subscriber) -> str:
        """Register a subscriber and return its connection ID."""
        connection_id = uuid4().hex
        self._connections[connection_id] = subscriber
        logfire.info(
            "Realtime client connected",
            connection_id=connection_id,
            connections=len(self._connections),
        )
        return connection_id

    def disconnect(self, connection_id: str) -> None:
        """Forget a connection and every room it joined."""
        for room in self._memberships.pop(connection_id, set()):
            members = self._rooms.get(room)
            if members is not None:
                members.discard(connection_id)
                if not members:
                    del self._rooms[room]

        if self._connections.pop(connection_id, None) is not None:
            logfire.info(
                "Realtime client disconnected",
                connection_id=connection_id,
                connections=len(self._connections),
            )

    def join(self, connection_id: str, testimonial_id: str) -> str:
        """Subscribe a connection to a testimonial's room."""
        room = room_name(testimonial_id)
        self._rooms[room].add(connection_id)
        self._memberships[connection_id].add(room)
        logfire.debug("Joined room", connection_id=connection_id, room=room)
        return room

    def leave(self, connection_id: str, testimonial_id: str) -> str:
        """Unsubscribe a connection from a testimonial's room."""
        room = room_name(testimonial_id)
        members = self._rooms.get(room)
        if members is not None:
            members.discard(connection_id)
            if not members:
                del self._rooms[room]
        self._memberships.get(connection_id, set()).discard(room)
        logfire.debug("Left room", connection_id=connection_id, room=room)
        return room

    async def send(self, connection_id: str, event: ServerEvent, data: Any) -> bool:
        """Deliver one event to one connection.

        Returns:
            True if delivered; False if the connection is unknown or the send
            failed (the connection is then dropped)
        """
        subscriber = self._connections.get(connection_id)
        if subscriber is None:
            return False

        try:
            await subscriber.send_json({"event": event.value, "data": data})
        except Exception as e:
            logfire.warn(
                "Dropping unreachable realtime client",
                connection_id=connection_id,
                event=event.value,
                error=str(e),
            )
            self.disconnect(connection_id)
            return False
        return True

    async def broadcast(self, event: ServerEvent, data: Any) -> int:
        """Deliver an event to every connection.

        Returns:
            Number of connections the event reached
        """
        delivered = 0
        for connection_id in list(self._connections):
            if await self.send(connection_id, event, data):
                delivered += 1
        logfire.debug("Broadcast", event=event.value, delivered=delivered)
        return delivered

    async def emit_to_room(
        self,
        testimonial_id: str,
        event: ServerEvent,
        data: Any,
        skip: str | None = None,
    ) -> int:
        """Deliver an event to a testimonial's room.

        Args:
            testimonial_id: Room to deliver to
            event: Server event name
            data: JSON payload
            skip: Connection to leave out (typically the sender)

        Returns:
            Number of connections the event reached
        """
        delivered = 0
        for connection_id in sorted(self.members(testimonial_id)):
            if connection_id == skip:
                continue
            if await self.send(connection_id, event, data):
                delivered += 1
        logfire.debug(
            "Room emit",
            room=room_name(testimonial_id),
            event=event.value,
            delivered=delivered,
        )
        return delivered

    async def close(self) -> None:
        """Drop every connection (process shutdown)."""
        count = len(self._connections)
        self._connections.clear()
        self._rooms.clear()
        self._memberships.clear()
        logfire.info("Realtime broadcaster closed", dropped_connections=count)
