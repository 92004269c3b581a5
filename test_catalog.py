from furnitune.catalog import CATEGORIES, ProductService


def test_all_products_newest_first(store):
    products = store.products.get_all_products()

    assert len(products) == 23
    ids = [p["id"] for p in products]
    assert ids == sorted(ids, reverse=True)


def test_products_by_category(store):
    sofas = store.products.get_products_by_category("Sofas")
    assert {p["name"] for p in sofas} == {"Classic Sofa", "Harbor Sofa", "Nova Sofa", "Terra Sofa"}

    assert len(store.products.get_products_by_category("Tables")) == 3
    assert len(store.products.get_products_by_category("All")) == 23
    assert store.products.get_products_by_category("Lamps") == []


def test_every_seeded_category_is_listed():
    seeded = {"Sofas", "Chairs", "Beds", "Sectionals", "Ottomans", "Tables"}
    assert seeded < set(CATEGORIES)


def test_search_is_case_insensitive_over_name_and_description(store):
    results = store.products.search_products("SOFA")
    assert {p["name"] for p in results} == {"Classic Sofa", "Harbor Sofa", "Nova Sofa", "Terra Sofa"}

    storage = store.products.search_products("storage")
    assert {p["name"] for p in storage} == {"Halo Ottoman", "Pique Ottoman", "Delta Bed"}


def test_search_treats_wildcards_literally(store):
    assert store.products.search_products("%") == []
    assert store.products.search_products("_") == []
    assert store.products.browse("Sofas", "%") == []

    assert store.products.search_products("So_a") == []
    assert len(store.products.search_products("Sofa")) == 4


def test_browse_combines_category_and_search(store):
    results = store.products.browse("Ottomans", "storage")
    assert {p["name"] for p in results} == {"Halo Ottoman", "Pique Ottoman"}

    assert len(store.products.browse()) == 23


def test_get_product_by_id(store):
    product = store.products.get_product_by_id(1)
    assert product["name"] == "Classic Sofa"
    assert product["price"] == 14999

    assert store.products.get_product_by_id(999) is None


def test_colors_and_sizes_are_split_and_trimmed(store):
    product = store.products.get_product_by_id(1)

    assert ProductService.get_product_colors(product) == ["Gray", "Beige", "Navy"]
    assert ProductService.get_product_sizes(product) == ["2-Seater", "3-Seater"]


def test_attribute_parsing_edge_cases():
    assert ProductService.get_product_colors({"colors": " Red , Blue ,"}) == ["Red", "Blue"]
    assert ProductService.get_product_colors({"colors": ""}) == []
    assert ProductService.get_product_colors({"colors": None}) == []
    assert ProductService.get_product_sizes({}) == []


def test_update_product_rating_recomputes_from_reviews(store, database):
    database.execute_update("UPDATE products SET rating_avg = 1.5, reviews_count = 42 WHERE id = 1")

    store.products.update_product_rating(1)

    product = store.products.get_product_by_id(1)
    assert product["rating_avg"] == 5.0
    assert product["reviews_count"] == 1


def test_update_product_rating_without_reviews_is_zero(store):
    store.products.update_product_rating(2)

    product = store.products.get_product_by_id(2)
    assert product["rating_avg"] == 0
    assert product["reviews_count"] == 0
