"""Test doubles for realtime subscribers."""

from typing import Any


class RecordingSocket:
    """Subscriber that records every message it is sent."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []

    async def send_json(self, data: Any) -> None:
        self.sent.append(data)

    def events(self) -> list[str]:
        return [message["event"] for message in self.sent]


class BrokenSocket:
    """Subscriber whose connection has already gone away."""

    async def send_json(self, data: Any) -> None:
        raise ConnectionResetError("peer closed")
