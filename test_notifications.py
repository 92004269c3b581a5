from furnitune import ErrorKind
from conftest import JAKE_ID, ENRICO_ID


def test_seeded_inbox(store):
    notifications = store.notifications.get_user_notifications(JAKE_ID)

    assert [n["title"] for n in notifications] == [
        "Flash Sale Alert! ⚡", "New Collection Available", "Welcome to Furnitune! 🎉"
    ]
    assert store.notifications.get_unread_count(JAKE_ID) == 3
    assert store.notifications.get_unread_count(ENRICO_ID) == 2


def test_notify_appends(store):
    notification_id = store.notifications.notify(JAKE_ID, "Back in stock", "Aria Bed is back")

    newest = store.notifications.get_user_notifications(JAKE_ID)[0]
    assert newest["id"] == notification_id
    assert newest["type"] == "general"
    assert newest["is_read"] == 0


def test_notify_unknown_user_is_swallowed(store):
    assert store.notifications.notify(999, "Hello", "Nobody home") is None


def test_mark_as_read(store):
    first = store.notifications.get_user_notifications(JAKE_ID)[0]

    assert store.notifications.mark_as_read(first["id"], JAKE_ID)
    assert store.notifications.get_unread_count(JAKE_ID) == 2

    assert store.notifications.mark_as_read(first["id"], ENRICO_ID).error == ErrorKind.NOT_FOUND


def test_mark_all_as_read(store):
    result = store.notifications.mark_all_as_read(JAKE_ID)

    assert result.data == 3
    assert store.notifications.get_unread_count(JAKE_ID) == 0
    assert store.notifications.get_unread_count(ENRICO_ID) == 2


def test_delete_notification(store):
    first = store.notifications.get_user_notifications(JAKE_ID)[0]

    assert store.notifications.delete_notification(first["id"], ENRICO_ID).error == ErrorKind.NOT_FOUND
    assert store.notifications.delete_notification(first["id"], JAKE_ID)
    assert len(store.notifications.get_user_notifications(JAKE_ID)) == 2
