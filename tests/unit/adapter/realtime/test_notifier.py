"""Unit tests for EventPublisher."""

from uuid import uuid4

import pytest

from stories.adapter.realtime import EventPublisher, RoomBroadcaster
from stories.config import RealtimeSettings
from stories.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryUnitOfWork,
)
from tests.unit.adapter.realtime.fakes import RecordingSocket


@pytest.fixture
def broadcaster():
    return RoomBroadcaster()


@pytest.fixture
def unit_of_work():
    return InMemoryUnitOfWork(InMemoryDatabase())


def make_publisher(broadcaster, unit_of_work, **settings):
    return EventPublisher(broadcaster, unit_of_work, RealtimeSettings(**settings))


class TestEventPublisher:
    @pytest.mark.asyncio
    async def test_testimonial_created_goes_to_everyone(
        self, broadcaster, unit_of_work
    ):
        socket = RecordingSocket()
        broadcaster.connect(socket)
        publisher = make_publisher(broadcaster, unit_of_work)
        testimonial_id = str(uuid4())

        publisher.testimonial_created({"id": testimonial_id, "content": "hi"})
        await unit_of_work.commit()

        assert socket.sent == [
            {
                "event": "testimonial-created",
                "data": {
                    "id": testimonial_id,
                    "content": "hi",
                    "testimonial_id": testimonial_id,
                },
            }
        ]

    @pytest.mark.asyncio
    async def test_comment_events_go_to_the_room(self, broadcaster, unit_of_work):
        testimonial_id = str(uuid4())
        member, outsider = RecordingSocket(), RecordingSocket()
        broadcaster.join(broadcaster.connect(member), testimonial_id)
        broadcaster.connect(outsider)
        publisher = make_publisher(broadcaster, unit_of_work)

        publisher.comment_created({"id": "c1", "testimonial_id": testimonial_id})
        publisher.comment_like_updated(
            {"id": "c1", "testimonial_id": testimonial_id, "likes_count": 1}
        )
        publisher.comment_deleted(
            {"comment_id": "c1", "testimonial_id": testimonial_id}
        )
        publisher.testimonial_like_updated(
            {"id": testimonial_id, "testimonial_id": testimonial_id}
        )
        await unit_of_work.commit()

        assert member.events() == [
            "comment-created",
            "comment-like-update",
            "comment-deleted",
            "testimonial-like-update",
        ]
        assert outsider.sent == []

    @pytest.mark.asyncio
    async def test_nothing_is_sent_before_commit(self, broadcaster, unit_of_work):
        testimonial_id = str(uuid4())
        member = RecordingSocket()
        broadcaster.join(broadcaster.connect(member), testimonial_id)
        publisher = make_publisher(broadcaster, unit_of_work)

        publisher.comment_created({"id": "c1", "testimonial_id": testimonial_id})

        assert member.sent == []
        assert unit_of_work.pending == 1

        await unit_of_work.commit()

        assert member.events() == ["comment-created"]
        assert unit_of_work.pending == 0

    @pytest.mark.asyncio
    async def test_rolled_back_request_publishes_nothing(
        self, broadcaster, unit_of_work
    ):
        socket = RecordingSocket()
        broadcaster.connect(socket)
        publisher = make_publisher(broadcaster, unit_of_work)

        publisher.testimonial_deleted(str(uuid4()))
        unit_of_work.discard()
        await unit_of_work.commit()

        assert socket.sent == []

    @pytest.mark.asyncio
    async def test_disabled_publisher_stays_quiet(self, broadcaster, unit_of_work):
        socket = RecordingSocket()
        broadcaster.connect(socket)
        publisher = make_publisher(
            broadcaster, unit_of_work, publish_from_api=False
        )

        publisher.testimonial_deleted(str(uuid4()))
        await unit_of_work.commit()

        assert unit_of_work.pending == 0
        assert socket.sent == []
