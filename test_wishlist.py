from furnitune import ErrorKind
from conftest import JAKE_ID, ENRICO_ID


def test_adding_twice_keeps_one_row(store, count_rows):
    assert store.wishlist.add_to_wishlist(JAKE_ID, 3)
    assert store.wishlist.add_to_wishlist(JAKE_ID, 3)

    assert count_rows("wishlists", "user_id = ? AND product_id = ?", (JAKE_ID, 3)) == 1


def test_membership_and_removal(store):
    store.wishlist.add_to_wishlist(JAKE_ID, 3)

    assert store.wishlist.is_in_wishlist(JAKE_ID, 3)
    assert not store.wishlist.is_in_wishlist(ENRICO_ID, 3)

    assert store.wishlist.remove_from_wishlist(JAKE_ID, 3)
    assert not store.wishlist.is_in_wishlist(JAKE_ID, 3)
    # Removing something that is not there is still fine
    assert store.wishlist.remove_from_wishlist(JAKE_ID, 3)


def test_wishlist_products_most_recent_first(store):
    for product_id in (3, 9, 5):
        store.wishlist.add_to_wishlist(JAKE_ID, product_id)

    products = store.wishlist.get_wishlist_products(JAKE_ID)

    assert [p["id"] for p in products] == [5, 9, 3]
    assert products[0]["name"] == "Atlas Chair"
    assert store.wishlist.get_wishlist_product_ids(JAKE_ID) == [5, 9, 3]
    assert store.wishlist.get_wishlist_products(ENRICO_ID) == []


def test_unknown_product(store):
    assert store.wishlist.add_to_wishlist(JAKE_ID, 999).error == ErrorKind.NOT_FOUND
