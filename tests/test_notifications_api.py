"""Integration tests for the notification HTTP endpoints."""

from __future__ import annotations

import logging
from datetime import timedelta

import anyio
import pytest
from fastapi.testclient import TestClient

from app.infrastructure.notifications import LiveChannel
from app.infrastructure.security import create_access_token


@pytest.fixture()
def app():
    from main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def _auth(user) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


def test_endpoints_require_a_valid_token(client, users):
    assert client.get("/notifications/").status_code == 401
    assert client.get("/notifications/stream").status_code == 401

    bad = client.get("/notifications/", headers={"Authorization": "Bearer nope"})
    assert bad.status_code == 401
    assert bad.headers["WWW-Authenticate"] == "Bearer"

    expired = create_access_token(users["bob"].id, expires_delta=timedelta(minutes=-1))
    assert client.get("/notifications/", params={"token": expired}).status_code == 401


def test_token_query_parameter_is_accepted(client, users):
    token = create_access_token(users["bob"].id)

    response = client.get("/notifications/", params={"token": token})

    assert response.status_code == 200
    assert response.json() == {"success": True, "notifications": [], "unreadCount": 0}


def test_post_fan_out_is_visible_through_inbox(client, users):
    response = client.post(
        "/posts/",
        json={"post_type": "text", "content": "Lost my keys near the gym"},
        headers=_auth(users["alice"]),
    )
    assert response.status_code == 201
    post_id = response.json()["id"]

    listing = client.get("/notifications/", headers=_auth(users["dave"]))
    assert listing.status_code == 200
    body = listing.json()
    assert body["unreadCount"] == 1
    (notification,) = body["notifications"]
    assert notification["kind"] == "post"
    assert notification["subject_ref"] == post_id
    assert notification["actor_id"] == users["alice"].id
    assert notification["actor"] == {
        "id": users["alice"].id,
        "full_name": "Alice Doe",
        "username": "alice",
    }
    assert notification["read"] is False

    author_listing = client.get("/notifications/", headers=_auth(users["alice"]))
    assert author_listing.json()["unreadCount"] == 0


def test_write_pushes_to_online_recipient(app, client, users):
    channel = LiveChannel(users["bob"].id)
    app.state.notification_manager.register(users["bob"].id, channel)

    response = client.post(
        "/messages/",
        json={"to_user_id": users["bob"].id, "text": "Is this your wallet?"},
        headers=_auth(users["alice"]),
    )
    assert response.status_code == 201

    async def _frames():
        channel.close()
        return [frame async for frame in channel.frames()]

    frames = anyio.run(_frames)
    assert len(frames) == 2
    assert '"type":"new_notification"' in frames[1]
    assert '"preview":"Is this your wallet?"' in frames[1]


def test_counts_and_read_flow(client, users):
    alice, bob = users["alice"], users["bob"]
    client.post("/posts/", json={"post_type": "text", "content": "hello"}, headers=_auth(alice))
    client.post("/messages/", json={"to_user_id": bob.id, "text": "one"}, headers=_auth(alice))
    client.post("/messages/", json={"to_user_id": bob.id, "text": "two"}, headers=_auth(alice))
    client.post("/connections/", json={"to_user_id": bob.id}, headers=_auth(alice))

    counts = client.get("/notifications/counts", headers=_auth(bob)).json()["counts"]
    assert counts == {"post": 1, "message": 2, "connection": 1, "total": 4}

    listing = client.get("/notifications/", headers=_auth(bob)).json()["notifications"]
    message_id = next(n["id"] for n in listing if n["kind"] == "message")

    for _ in range(2):
        read = client.patch(f"/notifications/{message_id}/read", headers=_auth(bob))
        assert read.status_code == 200
        assert read.json()["notification"]["read"] is True
        assert read.json()["notification"]["actor"]["username"] == "alice"

    counts = client.get("/notifications/counts", headers=_auth(bob)).json()["counts"]
    assert counts == {"post": 1, "message": 1, "connection": 1, "total": 3}

    by_kind = client.patch(
        "/notifications/read-by-kind", json={"kind": "message"}, headers=_auth(bob)
    )
    assert by_kind.status_code == 200
    assert by_kind.json()["updated"] == 1

    read_all = client.patch("/notifications/read-all", headers=_auth(bob))
    assert read_all.status_code == 200
    assert read_all.json() == {
        "success": True,
        "message": "All notifications marked as read",
        "updated": 2,
    }

    counts = client.get("/notifications/counts", headers=_auth(bob)).json()["counts"]
    assert counts["total"] == 0
    other = client.get("/notifications/counts", headers=_auth(users["carol"])).json()["counts"]
    assert other["total"] == 1


def test_foreign_or_unknown_notification_is_not_found(client, users):
    alice, bob, carol = users["alice"], users["bob"], users["carol"]
    client.post("/messages/", json={"to_user_id": bob.id, "text": "hi"}, headers=_auth(alice))
    notification_id = client.get("/notifications/", headers=_auth(bob)).json()[
        "notifications"
    ][0]["id"]

    foreign = client.patch(f"/notifications/{notification_id}/read", headers=_auth(carol))
    assert foreign.status_code == 404
    assert foreign.json()["detail"] == "Notification not found"

    assert client.patch("/notifications/9999/read", headers=_auth(bob)).status_code == 404
    assert client.get("/notifications/counts", headers=_auth(bob)).json()["counts"]["total"] == 1


def test_list_limit_is_clamped(client, users):
    alice, bob = users["alice"], users["bob"]
    for index in range(3):
        client.post(
            "/messages/", json={"to_user_id": bob.id, "text": f"m{index}"}, headers=_auth(alice)
        )

    limited = client.get("/notifications/", params={"limit": 2}, headers=_auth(bob)).json()
    assert len(limited["notifications"]) == 2
    assert limited["unreadCount"] == 3

    large = client.get("/notifications/", params={"limit": 500}, headers=_auth(bob))
    assert large.status_code == 200
    assert len(large.json()["notifications"]) == 3

    assert client.get("/notifications/", params={"limit": 0}, headers=_auth(bob)).status_code == 422


def test_read_by_kind_rejects_unknown_kind(client, users):
    response = client.patch(
        "/notifications/read-by-kind", json={"kind": "poke"}, headers=_auth(users["bob"])
    )

    assert response.status_code == 422


def test_domain_write_validation_errors(client, users):
    alice, bob = users["alice"], users["bob"]

    item_post = client.post(
        "/posts/", json={"post_type": "text", "is_item_post": True}, headers=_auth(alice)
    )
    assert item_post.status_code == 400

    empty_message = client.post("/messages/", json={"to_user_id": bob.id}, headers=_auth(alice))
    assert empty_message.status_code == 400

    unknown = client.post("/messages/", json={"to_user_id": 999, "text": "hi"}, headers=_auth(alice))
    assert unknown.status_code == 404

    assert client.post("/connections/", json={"to_user_id": bob.id}, headers=_auth(alice)).status_code == 201
    duplicate = client.post("/connections/", json={"to_user_id": alice.id}, headers=_auth(bob))
    assert duplicate.status_code == 409
    assert client.post("/connections/", json={"to_user_id": alice.id}, headers=_auth(alice)).status_code == 400

    counts = client.get("/notifications/counts", headers=_auth(bob)).json()["counts"]
    assert counts == {"post": 0, "message": 0, "connection": 1, "total": 1}


def test_lifespan_logs_start_and_stop(app, caplog):
    with caplog.at_level(logging.INFO, logger="app"):
        with TestClient(app):
            pass

    assert "Notification service started" in caplog.text
    assert "Notification service stopped with 0 live streams open" in caplog.text
