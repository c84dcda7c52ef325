"""Realtime WebSocket endpoint."""

import logfire
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, WebSocket

from stories.adapter.realtime import RoomBroadcaster, handle_message

router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
@inject
async def realtime_socket(
    websocket: WebSocket,
    broadcaster: FromDishka[RoomBroadcaster],
) -> None:
    """Subscribe to testimonial rooms and relay client events.

    Frames are JSON objects ``{"event": ..., "data": ...}`` sent as text or
    binary messages.
    """
    await websocket.accept()
    connection_id = broadcaster.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                logfire.debug(
                    "Realtime socket closed",
                    connection_id=connection_id,
                    code=message.get("code"),
                )
                return
            raw = message.get("text")
            if raw is None:
                raw = message.get("bytes") or b""
            await handle_message(broadcaster, connection_id, raw)
    finally:
        broadcaster.disconnect(connection_id)
