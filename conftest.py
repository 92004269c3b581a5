"""
Shared fixtures: every test gets its own seeded database file.
"""

import pytest

from furnitune import Database, Storefront

JAKE_ID = 1
ENRICO_ID = 2


@pytest.fixture
def database(tmp_path):
    database = Database(tmp_path / "furnitune.db", seed=True)
    yield database
    database.close()


@pytest.fixture
def store(database):
    return Storefront(database, shipping_fee=100.0)


@pytest.fixture
def count_rows(database):
    def _count(table, where="1 = 1", params=()):
        return database.fetch_value(f"SELECT COUNT(*) FROM {table} WHERE {where}", params, default=0)
    return _count
