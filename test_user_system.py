"""
Accounts: registration, login, password and profile changes
"""

from furnitune import ErrorKind
from conftest import JAKE_ID, ENRICO_ID


def test_register_then_login_returns_same_user(store):
    registered = store.auth.register("maria@example.com", "s3cret", "Maria Santos", "09170000000")
    assert registered
    user_id = registered.data["id"]
    assert registered.data["email"] == "maria@example.com"
    assert registered.data["phone"] == "09170000000"

    login = store.auth.login("maria@example.com", "s3cret")
    assert login
    assert login.data["id"] == user_id
    # The full row comes back, password included
    assert login.data["password"] == "s3cret"


def test_register_without_phone_stores_null(store):
    result = store.auth.register("nophone@example.com", "pw", "No Phone")
    assert result
    assert result.data["phone"] is None


def test_login_failures_are_uniform(store):
    wrong_password = store.auth.login("jake@gmail.com", "nope")
    unknown_email = store.auth.login("ghost@gmail.com", "12345")

    assert not wrong_password
    assert not unknown_email
    assert wrong_password.message == unknown_email.message == "Invalid email or password"
    assert wrong_password.error == unknown_email.error == ErrorKind.NOT_FOUND


def test_login_is_case_sensitive_on_email(store):
    assert store.auth.login("jake@gmail.com", "12345")
    assert not store.auth.login("JAKE@gmail.com", "12345")


def test_duplicate_registration_leaves_users_unchanged(store, count_rows):
    before = count_rows("users")

    result = store.auth.register("jake@gmail.com", "other", "Another Jake")

    assert not result
    assert result.error == ErrorKind.CONFLICT
    assert result.message == "Email already registered"
    assert count_rows("users") == before


def test_change_password_requires_current_password(store):
    rejected = store.auth.change_password(JAKE_ID, "wrong", "newpass")
    assert not rejected
    assert rejected.error == ErrorKind.INVALID
    assert store.auth.login("jake@gmail.com", "12345")

    assert store.auth.change_password(JAKE_ID, "12345", "newpass")
    assert not store.auth.login("jake@gmail.com", "12345")
    assert store.auth.login("jake@gmail.com", "newpass")


def test_update_profile_overwrites_name_and_phone(store):
    assert store.profiles.update_profile(JAKE_ID, "Jake P.", None)

    user = store.profiles.get_user_by_id(JAKE_ID)
    assert user["name"] == "Jake P."
    assert user["phone"] is None
    # Not given, so untouched
    assert user["email"] == "jake@gmail.com"
    assert user["profile_image"] == "../Assets/profile/jake.png"


def test_update_profile_email_and_image(store):
    image = "data:image/png;base64,iVBORw0KGgo="
    assert store.profiles.update_profile(
        JAKE_ID, "Jake Portacio", "0999", email="jake@furnitune.ph", profile_image=image
    )

    user = store.profiles.get_user_by_id(JAKE_ID)
    assert user["email"] == "jake@furnitune.ph"
    assert user["profile_image"] == image
    assert store.auth.login("jake@furnitune.ph", "12345")


def test_update_profile_email_taken_by_another_user(store):
    result = store.profiles.update_profile(JAKE_ID, "Jake", email="enrico@gmail.com")

    assert not result
    assert result.error == ErrorKind.CONFLICT
    assert store.profiles.get_user_by_id(JAKE_ID)["email"] == "jake@gmail.com"


def test_update_profile_unknown_user(store):
    result = store.profiles.update_profile(999, "Nobody")
    assert result.error == ErrorKind.NOT_FOUND


def test_update_profile_without_name_is_invalid(store):
    result = store.profiles.update_profile(JAKE_ID, None)

    assert not result
    assert result.error == ErrorKind.INVALID
    assert store.profiles.get_user_by_id(JAKE_ID)["name"] == "Jake Portacio"


def test_register_without_name_is_invalid(store, count_rows):
    before = count_rows("users")

    result = store.auth.register("noname@example.com", "pw", None)

    assert result.error == ErrorKind.INVALID
    assert count_rows("users") == before


def test_get_user_by_id_unknown_is_none(store):
    assert store.profiles.get_user_by_id(999) is None
    assert store.profiles.get_user_by_id(ENRICO_ID)["name"] == "Enrico Valencia"


def test_profile_stats(store):
    store.cart.add_to_cart(JAKE_ID, 1)
    store.cart.add_to_cart(JAKE_ID, 2)

    stats = store.profiles.get_profile_stats(JAKE_ID)

    # Jake has two seeded reviews and no orders yet
    assert stats == {"total_orders": 0, "total_reviews": 2, "cart_items": 2}
