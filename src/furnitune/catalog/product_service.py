"""
Product Catalog Service
Read-only product queries plus the denormalized rating aggregate
"""

import logging
from typing import Any, Dict, List, Optional

from ..db import Database, StoreError, db

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"

# Category chips shown on the home screen
CATEGORIES = [ALL_CATEGORIES, "Sofas", "Chairs", "Tables", "Beds", "Sectionals", "Ottomans"]

NEWEST_FIRST = "ORDER BY created_at DESC, id DESC"

MATCHES_TERM = "(name LIKE ? ESCAPE '\\' OR description LIKE ? ESCAPE '\\')"


def _split_attribute(raw: Optional[str]) -> List[str]:
    # Comma-joined list; a value containing a comma cannot round-trip
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _contains_pattern(term: str) -> str:
    # % and _ typed by the user match themselves
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ProductService:
    def __init__(self, database: Optional[Database] = None):
        self.db = database or db

    def _query(self, query: str, params: tuple = ()) -> List[Dict[str, Any]]:
        try:
            return self.db.execute_query(query, params)
        except StoreError as e:
            logger.error(f"Error querying products: {e}")
            raise

    def get_all_products(self) -> List[Dict[str, Any]]:
        return self._query(f"SELECT * FROM products {NEWEST_FIRST}")

    def get_product_by_id(self, product_id: int) -> Optional[Dict[str, Any]]:
        try:
            return self.db.fetch_one("SELECT * FROM products WHERE id = ?", (product_id,))
        except StoreError as e:
            logger.error(f"Error getting product {product_id}: {e}")
            raise

    def get_products_by_category(self, category: str) -> List[Dict[str, Any]]:
        if category == ALL_CATEGORIES:
            return self.get_all_products()
        return self._query(
            f"SELECT * FROM products WHERE category = ? {NEWEST_FIRST}", (category,)
        )

    def search_products(self, search_term: str) -> List[Dict[str, Any]]:
        """Substring match on name or description (LIKE, case-insensitive for ASCII)"""
        pattern = _contains_pattern(search_term)
        return self._query(f"""
            SELECT * FROM products
            WHERE {MATCHES_TERM}
            {NEWEST_FIRST}
        """, (pattern, pattern))

    def browse(self, category: str = ALL_CATEGORIES, search_term: str = "") -> List[Dict[str, Any]]:
        """Category chip and search box combined"""
        conditions = []
        params = []

        if category and category != ALL_CATEGORIES:
            conditions.append("category = ?")
            params.append(category)

        if search_term:
            conditions.append(MATCHES_TERM)
            params.extend([_contains_pattern(search_term)] * 2)

        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        return self._query(f"SELECT * FROM products {where} {NEWEST_FIRST}", tuple(params))

    @staticmethod
    def get_product_colors(product: Dict[str, Any]) -> List[str]:
        return _split_attribute(product.get("colors"))

    @staticmethod
    def get_product_sizes(product: Dict[str, Any]) -> List[str]:
        return _split_attribute(product.get("sizes"))

    def update_product_rating(self, product_id: int):
        """
        Recompute rating_avg and reviews_count from the reviews table.
        Must be called by whoever writes or deletes a review; joins the
        caller's transaction when there is one.
        """
        with self.db.transaction():
            stats = self.db.fetch_one("""
                SELECT COALESCE(AVG(rating), 0) AS avg_rating, COUNT(*) AS count
                FROM reviews WHERE product_id = ?
            """, (product_id,))

            self.db.execute_update(
                "UPDATE products SET rating_avg = ?, reviews_count = ? WHERE id = ?",
                (stats["avg_rating"], stats["count"], product_id)
            )
