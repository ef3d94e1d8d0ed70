"""Tests for the per-user live channel registry."""

from app.infrastructure.notifications import LiveChannel, NotificationConnectionManager


def test_register_routes_user_to_channel():
    manager = NotificationConnectionManager()
    channel = LiveChannel(1)

    assert manager.register(1, channel) is None
    assert manager.lookup(1) is channel
    assert manager.is_online(1)
    assert not manager.is_online(2)
    assert len(manager) == 1


def test_newer_channel_replaces_previous_one():
    manager = NotificationConnectionManager()
    first, second = LiveChannel(1), LiveChannel(1)

    manager.register(1, first)
    replaced = manager.register(1, second)

    assert replaced is first
    assert manager.lookup(1) is second
    assert len(manager) == 1
    # The superseded stream stays open until its own transport ends.
    assert not first.closed


def test_stale_channel_cannot_evict_its_replacement():
    manager = NotificationConnectionManager()
    first, second = LiveChannel(1), LiveChannel(1)
    manager.register(1, first)
    manager.register(1, second)

    assert manager.unregister(1, first) is False
    assert manager.lookup(1) is second

    assert manager.unregister(1, second) is True
    assert manager.lookup(1) is None


def test_unregister_without_channel_removes_whatever_is_routed():
    manager = NotificationConnectionManager()
    manager.register(3, LiveChannel(3))

    assert manager.unregister(3) is True
    assert manager.unregister(3) is False
    assert len(manager) == 0


def test_online_users_is_a_snapshot():
    manager = NotificationConnectionManager()
    for user_id in (1, 2, 3):
        manager.register(user_id, LiveChannel(user_id))

    online = manager.online_users()
    manager.unregister(2)

    assert sorted(online) == [1, 2, 3]
    assert sorted(manager.online_users()) == [1, 3]
