"""End-to-end tests for the realtime socket.

The test client shares one event loop between HTTP calls and socket
sessions. REST mutations reach open sockets once the request has committed,
which is before the HTTP call returns to the test.
"""

import json

STORY = "The alumni network helped me land my first job abroad."


def share(client, headers) -> dict:
    response = client.post(
        "/api/testimonials", json={"content": STORY}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


def join(ws, testimonial_id: str) -> dict:
    ws.send_json({"event": "join-testimonial", "data": testimonial_id})
    return ws.receive_json()


class TestRealtimeSocket:
    def test_join_is_acknowledged(self, client, member):
        _, headers = member()
        testimonial = share(client, headers)

        with client.websocket_connect("/api/ws") as ws:
            ack = join(ws, testimonial["id"])

        assert ack == {
            "event": "joined-testimonial",
            "data": {
                "testimonial_id": testimonial["id"],
                "room": f"testimonial-{testimonial['id']}",
            },
        }

    def test_connections_show_in_health(self, client):
        with client.websocket_connect("/api/ws"):
            body = client.get("/health").json()

        assert body["realtime_connections"] == 1

    def test_new_testimonial_reaches_every_socket(self, client, member):
        _, headers = member()

        with client.websocket_connect("/api/ws") as ws:
            created = share(client, headers)
            message = ws.receive_json()

        assert message["event"] == "testimonial-created"
        assert message["data"]["id"] == created["id"]
        assert message["data"]["testimonial_id"] == created["id"]

    def test_comment_activity_reaches_room(self, client, member):
        _, headers = member()
        testimonial = share(client, headers)

        with client.websocket_connect("/api/ws") as ws:
            join(ws, testimonial["id"])

            created = client.post(
                "/api/comments",
                json={"testimonial_id": testimonial["id"], "content": "Hello!"},
                headers=headers,
            ).json()
            comment_created = ws.receive_json()

            client.post(f"/api/comments/{created['id']}/like", headers=headers)
            like_update = ws.receive_json()

            client.delete(f"/api/comments/{created['id']}", headers=headers)
            comment_deleted = ws.receive_json()

        assert comment_created["event"] == "comment-created"
        assert comment_created["data"]["id"] == created["id"]
        assert like_update["event"] == "comment-like-update"
        assert like_update["data"]["likes_count"] == 1
        assert like_update["data"]["testimonial_id"] == testimonial["id"]
        assert comment_deleted["event"] == "comment-deleted"
        assert comment_deleted["data"]["comment_id"] == created["id"]

    def test_typing_is_relayed_to_peers(self, client, member):
        _, headers = member()
        testimonial = share(client, headers)

        with client.websocket_connect("/api/ws") as alice:
            with client.websocket_connect("/api/ws") as bob:
                join(alice, testimonial["id"])
                join(bob, testimonial["id"])

                alice.send_json(
                    {
                        "event": "typing",
                        "data": {"testimonial_id": testimonial["id"], "name": "A"},
                    }
                )
                relayed = bob.receive_json()

        assert relayed == {
            "event": "user-typing",
            "data": {"testimonial_id": testimonial["id"], "name": "A"},
        }

    def test_bad_frame_gets_error_and_socket_stays_open(self, client, member):
        _, headers = member()
        testimonial = share(client, headers)

        with client.websocket_connect("/api/ws") as ws:
            ws.send_text("{not json")
            error = ws.receive_json()
            ack = join(ws, testimonial["id"])

        assert error["event"] == "error"
        assert ack["event"] == "joined-testimonial"

    def test_binary_frames_are_accepted(self, client, member):
        _, headers = member()
        testimonial = share(client, headers)

        with client.websocket_connect("/api/ws") as ws:
            ws.send_bytes(
                json.dumps(
                    {"event": "join-testimonial", "data": testimonial["id"]}
                ).encode()
            )
            ack = ws.receive_json()

            ws.send_bytes(b"not json")
            error = ws.receive_json()

            ws.send_bytes(json.dumps({"event": "typing", "data": "x"}).encode())
            bad_typing = ws.receive_json()

            # Still open after the bad frames
            rejoin = join(ws, testimonial["id"])

        assert ack["event"] == "joined-testimonial"
        assert error["event"] == "error"
        assert bad_typing["event"] == "error"
        assert rejoin["event"] == "joined-testimonial"

    def test_comment_event_follows_commit(self, client, member, database):
        _, headers = member()
        testimonial = share(client, headers)

        with client.websocket_connect("/api/ws") as ws:
            join(ws, testimonial["id"])
            commits_before = database.commits

            created = client.post(
                "/api/comments",
                json={"testimonial_id": testimonial["id"], "content": "Hello!"},
                headers=headers,
            ).json()
            message = ws.receive_json()

        assert message["data"]["id"] == created["id"]
        assert database.commits == commits_before + 1

    def test_rejected_mutation_publishes_nothing(self, client, member):
        _, author_headers = member("Alice Martin")
        _, other_headers = member("Bruno Diaz")
        testimonial = share(client, author_headers)

        with client.websocket_connect("/api/ws") as ws:
            join(ws, testimonial["id"])

            rejected = client.post(
                "/api/comments",
                json={"testimonial_id": testimonial["id"], "content": "   "},
                headers=other_headers,
            )
            forbidden = client.delete(
                f"/api/testimonials/{testimonial['id']}", headers=other_headers
            )
            accepted = client.post(
                "/api/comments",
                json={"testimonial_id": testimonial["id"], "content": "Hi"},
                headers=other_headers,
            ).json()
            first_event = ws.receive_json()

        assert rejected.status_code == 400
        assert forbidden.status_code == 403
        # Nothing was queued for the failed calls
        assert first_event["event"] == "comment-created"
        assert first_event["data"]["id"] == accepted["id"]
