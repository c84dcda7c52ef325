"""Realtime fan-out adapter."""

from .broadcaster import RoomBroadcaster, Subscriber
from .events import (
    RELAYS,
    Audience,
    ClientEvent,
    Frame,
    ServerEvent,
    extract_testimonial_id,
    parse_frame,
    room_name,
)
from .handler import handle_message
from .notifier import EventPublisher
from .view import CommentThreadView, LikeSnapshot

__all__ = [
    "RELAYS",
    "Audience",
    "ClientEvent",
    "CommentThreadView",
    "EventPublisher",
    "Frame",
    "LikeSnapshot",
    "RoomBroadcaster",
    "ServerEvent",
    "Subscriber",
    "extract_testimonial_id",
    "handle_message",
    "parse_frame",
    "room_name",
]
