"""Realtime event catalog.

Clients send ``{"event": ..., "data": ...}`` frames. Join and leave manage
room membership; every other client event is relayed under its server-side
name to the audience listed in ``RELAYS``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stories.adapter.error import RealtimeProtocolError


class ClientEvent(str, Enum):
    """Events a client may send."""

    JOIN_TESTIMONIAL = "join-testimonial"
    LEAVE_TESTIMONIAL = "leave-testimonial"
    NEW_TESTIMONIAL = "new-testimonial"
    TESTIMONIAL_LIKE = "testimonial-like"
    NEW_COMMENT = "new-comment"
    COMMENT_LIKE = "comment-like"
    DELETE_TESTIMONIAL = "delete-testimonial"
    DELETE_COMMENT = "delete-comment"
    TYPING = "typing"
    STOP_TYPING = "stop-typing"


class ServerEvent(str, Enum):
    """Events the server pushes to clients."""

    TESTIMONIAL_CREATED = "testimonial-created"
    TESTIMONIAL_DELETED = "testimonial-deleted"
    TESTIMONIAL_LIKE_UPDATE = "testimonial-like-update"
    COMMENT_CREATED = "comment-created"
    COMMENT_LIKE_UPDATE = "comment-like-update"
    COMMENT_DELETED = "comment-deleted"
    USER_TYPING = "user-typing"
    USER_STOP_TYPING = "user-stop-typing"
    JOINED_TESTIMONIAL = "joined-testimonial"
    LEFT_TESTIMONIAL = "left-testimonial"
    ERROR = "error"


class Audience(str, Enum):
    """Who receives a relayed event."""

    EVERYONE = "everyone"
    ROOM = "room"
    ROOM_EXCEPT_SENDER = "room_except_sender"


@dataclass(frozen=True)
class Relay:
    event: ServerEvent
    audience: Audience


RELAYS: dict[ClientEvent, Relay] = {
    ClientEvent.NEW_TESTIMONIAL: Relay(
        ServerEvent.TESTIMONIAL_CREATED, Audience.EVERYONE
    ),
    ClientEvent.DELETE_TESTIMONIAL: Relay(
        ServerEvent.TESTIMONIAL_DELETED, Audience.EVERYONE
    ),
    ClientEvent.TESTIMONIAL_LIKE: Relay(
        ServerEvent.TESTIMONIAL_LIKE_UPDATE, Audience.ROOM
    ),
    ClientEvent.NEW_COMMENT: Relay(ServerEvent.COMMENT_CREATED, Audience.ROOM),
    ClientEvent.COMMENT_LIKE: Relay(ServerEvent.COMMENT_LIKE_UPDATE, Audience.ROOM),
    ClientEvent.DELETE_COMMENT: Relay(ServerEvent.COMMENT_DELETED, Audience.ROOM),
    ClientEvent.TYPING: Relay(ServerEvent.USER_TYPING, Audience.ROOM_EXCEPT_SENDER),
    ClientEvent.STOP_TYPING: Relay(
        ServerEvent.USER_STOP_TYPING, Audience.ROOM_EXCEPT_SENDER
    ),
}


class Frame(BaseModel):
    """One realtime message."""

    event: str
    data: Any = None


def parse_frame(raw: str | bytes) -> Frame:
    """Decode a client frame.

    Raises:
        RealtimeProtocolError: If the frame is not a JSON object with an event
    """
    try:
        return Frame.model_validate_json(raw)
    except PydanticValidationError as e:
        raise RealtimeProtocolError(f"Malformed frame: {e}") from e


def room_name(testimonial_id: str) -> str:
    return f"testimonial-{testimonial_id}"


def extract_testimonial_id(data: Any) -> str:
    """Read the testimonial a frame refers to.

    Accepts a bare id or an object carrying ``testimonial_id`` (or
    ``testimonialId``). The id is returned in canonical UUID form so that
    every spelling of the same id lands in the same room.

    Raises:
        RealtimeProtocolError: If no well-formed testimonial id is present
    """
    if isinstance(data, dict):
        value = data.get("testimonial_id", data.get("testimonialId"))
    else:
        value = data

    if not isinstance(value, str):
        raise RealtimeProtocolError("Missing testimonial id")
    try:
        return str(UUID(value))
    except ValueError as e:
        raise RealtimeProtocolError(f"Invalid testimonial id: {value}") from e
