"""End-to-end tests for the comment endpoints."""

from uuid import uuid4

STORY = "Our capstone project taught me more than any lecture did."


def share(client, headers) -> dict:
    response = client.post(
        "/api/testimonials", json={"content": STORY}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


def comment(client, headers, testimonial_id, content="Loved it", parent_id=None):
    return client.post(
        "/api/comments",
        json={
            "testimonial_id": testimonial_id,
            "content": content,
            "parent_id": parent_id,
        },
        headers=headers,
    )


def thread(client, testimonial_id, headers=None) -> dict:
    response = client.get(
        f"/api/comments/testimonial/{testimonial_id}", headers=headers
    )
    assert response.status_code == 200, response.text
    return response.json()


class TestCommentThreads:
    def test_comment_and_reply_are_nested(self, client, member):
        # Arrange
        alice, alice_headers = member("Alice Martin")
        _, bob_headers = member("Bob Durand")
        testimonial = share(client, alice_headers)

        # Act
        root = comment(client, bob_headers, testimonial["id"], "Which course?")
        reply = comment(
            client,
            alice_headers,
            testimonial["id"],
            "Distributed systems",
            parent_id=root.json()["id"],
        )

        # Assert
        assert root.status_code == 201
        assert reply.status_code == 201
        assert reply.json()["depth"] == 1

        body = thread(client, testimonial["id"])
        assert body["count"] == 1
        [top] = body["comments"]
        assert top["content"] == "Which course?"
        assert top["replies_count"] == 1
        assert top["replies"][0]["author"]["id"] == str(alice.id)
        assert top["replies"][0]["replies"] == []

        refreshed = client.get(f"/api/testimonials/{testimonial['id']}").json()
        assert refreshed["comments_count"] == 2

    def test_comment_requires_authentication(self, client, member):
        _, headers = member()
        testimonial = share(client, headers)

        response = comment(client, {}, testimonial["id"])

        assert response.status_code == 401

    def test_blank_comment_is_bad_request(self, client, member):
        _, headers = member()
        testimonial = share(client, headers)

        response = comment(client, headers, testimonial["id"], "     ")

        assert response.status_code == 400

    def test_comment_on_unknown_testimonial_is_not_found(self, client, member):
        _, headers = member()

        response = comment(client, headers, str(uuid4()))

        assert response.status_code == 404

    def test_reply_across_testimonials_is_bad_request(self, client, member):
        _, headers = member()
        first = share(client, headers)
        second = share(client, headers)
        parent = comment(client, headers, first["id"]).json()

        response = comment(client, headers, second["id"], parent_id=parent["id"])

        assert response.status_code == 400

    def test_depth_ceiling(self, client, member, database):
        _, headers = member()
        testimonial = share(client, headers)

        parent_id = None
        for _ in range(11):
            created = comment(client, headers, testimonial["id"], parent_id=parent_id)
            assert created.status_code == 201
            parent_id = created.json()["id"]

        too_deep = comment(client, headers, testimonial["id"], parent_id=parent_id)

        assert too_deep.status_code == 400
        assert "depth" in too_deep.json()["detail"]
        # The rejected reply left no trace
        assert len(database.comments) == 11
        assert sorted(c.depth for c in database.comments.values()) == list(range(11))
        stored = client.get(f"/api/testimonials/{testimonial['id']}").json()
        assert stored["comments_count"] == 11

    def test_read_depth_cutoff(self, client, member):
        _, headers = member()
        testimonial = share(client, headers)
        parent_id = None
        for _ in range(7):
            parent_id = comment(
                client, headers, testimonial["id"], parent_id=parent_id
            ).json()["id"]

        node = thread(client, testimonial["id"])["comments"][0]
        depths = []
        while node:
            depths.append(node["depth"])
            node = node["replies"][0] if node["replies"] else None

        assert depths == [0, 1, 2, 3, 4, 5]

    def test_unknown_testimonial_thread_is_not_found(self, client):
        response = client.get(f"/api/comments/testimonial/{uuid4()}")

        assert response.status_code == 404


class TestCommentLikesAndDeletes:
    def test_like_comment_sets_viewer_flag(self, client, member):
        _, author = member("Alice Martin")
        _, fan = member("Bob Durand")
        testimonial = share(client, author)
        created = comment(client, author, testimonial["id"]).json()

        liked = client.post(f"/api/comments/{created['id']}/like", headers=fan)

        assert liked.status_code == 200
        assert liked.json()["testimonial_id"] == testimonial["id"]
        assert liked.json()["likes_count"] == 1
        [as_fan] = thread(client, testimonial["id"], headers=fan)["comments"]
        [as_author] = thread(client, testimonial["id"], headers=author)["comments"]
        assert as_fan["liked_by_user"] is True
        assert as_author["liked_by_user"] is False
        assert as_author["likes_count"] == 1

    def test_like_unknown_comment_is_not_found(self, client, member):
        _, headers = member()

        response = client.post(f"/api/comments/{uuid4()}/like", headers=headers)

        assert response.status_code == 404

    def test_delete_removes_subtree_and_recounts(self, client, member):
        _, author = member("Alice Martin")
        _, other = member("Bob Durand")
        testimonial = share(client, author)
        root = comment(client, other, testimonial["id"], "Root").json()
        comment(client, author, testimonial["id"], "Child", parent_id=root["id"])
        keeper = comment(client, author, testimonial["id"], "Keeper").json()

        forbidden = client.delete(f"/api/comments/{root['id']}", headers=author)
        deleted = client.delete(f"/api/comments/{root['id']}", headers=other)

        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json() == {
            "comment_id": root["id"],
            "testimonial_id": testimonial["id"],
            "parent_id": None,
            "message": "Comment deleted",
        }
        body = thread(client, testimonial["id"])
        assert [c["id"] for c in body["comments"]] == [keeper["id"]]
        refreshed = client.get(f"/api/testimonials/{testimonial['id']}").json()
        assert refreshed["comments_count"] == 1

    def test_deleting_testimonial_removes_its_comments(self, client, member, database):
        _, author = member()
        testimonial = share(client, author)
        comment(client, author, testimonial["id"])

        client.delete(f"/api/testimonials/{testimonial['id']}", headers=author)

        assert database.comments == {}
