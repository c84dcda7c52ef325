"""Handling of frames received from realtime clients."""

import logfire

from stories.adapter.error import RealtimeProtocolError
from stories.adapter.realtime.broadcaster import RoomBroadcaster
from stories.adapter.realtime.events import (
    RELAYS,
    Audience,
    ClientEvent,
    ServerEvent,
    extract_testimonial_id,
    parse_frame,
)


async def handle_message(
    broadcaster: RoomBroadcaster, connection_id: str, raw: str | bytes
) -> None:
    """Act on one client frame.

    Protocol errors are reported to the sender as an ``error`` event and the
    connection stays open.
    """
    try:
        frame = parse_frame(raw)
        try:
            event = ClientEvent(frame.event)
        except ValueError:
            raise RealtimeProtocolError(f"Unknown event: {frame.event}")

        if event == ClientEvent.JOIN_TESTIMONIAL:
            testimonial_id = extract_testimonial_id(frame.data)
            room = broadcaster.join(connection_id, testimonial_id)
            await broadcaster.send(
                connection_id,
                ServerEvent.JOINED_TESTIMONIAL,
                {"testimonial_id": testimonial_id, "room": room},
            )
            return

        if event == ClientEvent.LEAVE_TESTIMONIAL:
            testimonial_id = extract_testimonial_id(frame.data)
            room = broadcaster.leave(connection_id, testimonial_id)
            await broadcaster.send(
                connection_id,
                ServerEvent.LEFT_TESTIMONIAL,
                {"testimonial_id": testimonial_id, "room": room},
            )
            return

        relay = RELAYS[event]
        if relay.audience == Audience.EVERYONE:
            await broadcaster.broadcast(relay.event, frame.data)
        else:
            testimonial_id = extract_testimonial_id(frame.data)
            skip = (
                connection_id
                if relay.audience == Audience.ROOM_EXCEPT_SENDER
                else None
            )
            await broadcaster.emit_to_room(
                testimonial_id, relay.event, frame.data, skip=skip
            )
    except RealtimeProtocolError as e:
        logfire.warn(
            "Rejected realtime frame", connection_id=connection_id, error=str(e)
        )
        await broadcaster.send(connection_id, ServerEvent.ERROR, {"message": str(e)})
