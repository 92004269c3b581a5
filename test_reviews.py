from furnitune import ErrorKind
from conftest import JAKE_ID, ENRICO_ID

CLASSIC_SOFA = 1   # seeded review by Jake, rating 5
HARBOR_SOFA = 2    # no seeded reviews


def test_second_review_updates_the_first(store, count_rows):
    assert store.reviews.create_review(JAKE_ID, CLASSIC_SOFA, 5, "Great")
    assert store.reviews.create_review(JAKE_ID, CLASSIC_SOFA, 3, "Cushions sag")

    assert count_rows("reviews", "user_id = ? AND product_id = ?", (JAKE_ID, CLASSIC_SOFA)) == 1
    review = store.reviews.get_user_product_review(JAKE_ID, CLASSIC_SOFA)
    assert review["rating"] == 3
    assert review["message"] == "Cushions sag"

    product = store.products.get_product_by_id(CLASSIC_SOFA)
    assert product["rating_avg"] == 3.0
    assert product["reviews_count"] == 1


def test_rating_outside_range_is_rejected(store, count_rows):
    before = count_rows("reviews")

    for rating in (0, 6):
        result = store.reviews.create_review(ENRICO_ID, HARBOR_SOFA, rating)
        assert not result
        assert result.error == ErrorKind.INVALID

    assert count_rows("reviews") == before
    assert store.products.get_product_by_id(HARBOR_SOFA)["reviews_count"] == 0


def test_invalid_update_keeps_existing_review(store):
    result = store.reviews.create_review(JAKE_ID, CLASSIC_SOFA, 9)

    assert result.error == ErrorKind.INVALID
    assert store.reviews.get_user_product_review(JAKE_ID, CLASSIC_SOFA)["rating"] == 5


def test_review_for_unknown_product(store):
    result = store.reviews.create_review(JAKE_ID, 999, 4)
    assert result.error == ErrorKind.NOT_FOUND


def test_rating_distribution(store):
    raters = [JAKE_ID, ENRICO_ID]
    for n in range(2):
        registered = store.auth.register(f"rater{n}@example.com", "pw", f"Rater {n}")
        raters.append(registered.data["id"])

    for user_id, rating in zip(raters, [5, 5, 4, 3]):
        assert store.reviews.create_review(user_id, HARBOR_SOFA, rating)

    assert store.reviews.get_rating_distribution(HARBOR_SOFA) == {1: 0, 2: 0, 3: 1, 4: 1, 5: 2}
    product = store.products.get_product_by_id(HARBOR_SOFA)
    assert product["rating_avg"] == 4.25
    assert product["reviews_count"] == 4


def test_rating_distribution_without_reviews(store):
    assert store.reviews.get_rating_distribution(HARBOR_SOFA) == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}


def test_can_review_only_after_completed_order(store):
    store.cart.add_to_cart(JAKE_ID, HARBOR_SOFA)
    order_id = store.orders.create_order(JAKE_ID, "{}").data

    # No customer flow completes an order, so a fresh purchase cannot be reviewed yet
    assert store.reviews.can_user_review(JAKE_ID, HARBOR_SOFA) is False

    store.orders.update_order_status(order_id, "completed")

    assert store.reviews.can_user_review(JAKE_ID, HARBOR_SOFA) is True
    assert store.reviews.can_user_review(ENRICO_ID, HARBOR_SOFA) is False


def test_cancelled_order_does_not_allow_review(store):
    store.cart.add_to_cart(JAKE_ID, HARBOR_SOFA)
    order_id = store.orders.create_order(JAKE_ID, "{}").data
    store.orders.cancel_order(order_id, JAKE_ID)

    assert store.reviews.can_user_review(JAKE_ID, HARBOR_SOFA) is False


def test_review_can_reference_order(store):
    store.cart.add_to_cart(JAKE_ID, HARBOR_SOFA)
    order_id = store.orders.create_order(JAKE_ID, "{}").data

    assert store.reviews.create_review(JAKE_ID, HARBOR_SOFA, 4, order_id=order_id)
    assert store.reviews.get_user_product_review(JAKE_ID, HARBOR_SOFA)["order_id"] == order_id


def test_delete_review_is_owner_checked_and_recomputes(store):
    review_id = store.reviews.get_user_product_review(JAKE_ID, CLASSIC_SOFA)["id"]

    assert store.reviews.delete_review(review_id, ENRICO_ID).error == ErrorKind.NOT_FOUND
    assert store.products.get_product_by_id(CLASSIC_SOFA)["reviews_count"] == 1

    assert store.reviews.delete_review(review_id, JAKE_ID)

    product = store.products.get_product_by_id(CLASSIC_SOFA)
    assert product["rating_avg"] == 0
    assert product["reviews_count"] == 0
    assert store.reviews.get_user_product_review(JAKE_ID, CLASSIC_SOFA) is None


def test_review_listings(store):
    store.reviews.create_review(ENRICO_ID, CLASSIC_SOFA, 4, "Solid")

    product_reviews = store.reviews.get_product_reviews(CLASSIC_SOFA)
    assert {r["user_name"] for r in product_reviews} == {"Jake Portacio", "Enrico Valencia"}

    jake_reviews = store.reviews.get_user_reviews(JAKE_ID)
    assert {r["product_name"] for r in jake_reviews} == {"Classic Sofa", "Cinder Chair"}
    assert all(r["product_image"] for r in jake_reviews)


def test_fractional_or_missing_rating_is_invalid(store, count_rows):
    before = count_rows("reviews")

    for rating in (4.5, None):
        result = store.reviews.create_review(JAKE_ID, HARBOR_SOFA, rating)
        assert not result
        assert result.error == ErrorKind.INVALID

    assert count_rows("reviews") == before
    assert store.reviews.get_rating_distribution(HARBOR_SOFA) == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert store.products.get_product_by_id(HARBOR_SOFA)["reviews_count"] == 0
