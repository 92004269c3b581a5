import logging
from typing import Any, Dict, List, Optional

from ..db import ConstraintError, Database, StoreError, db
from ..models import ErrorKind, OperationResult

logger = logging.getLogger(__name__)


class WishlistService:
    """Saved products; one row per user and product (UNIQUE constraint)"""

    def __init__(self, database: Optional[Database] = None):
        self.db = database or db

    def add_to_wishlist(self, user_id: int, product_id: int) -> OperationResult:
        """Adding an already saved product is a no-op success"""
        try:
            self.db.execute_update(
                "INSERT OR IGNORE INTO wishlists (user_id, product_id) VALUES (?, ?)",
                (user_id, product_id)
            )
        except ConstraintError as e:
            if e.constraint == "FOREIGN KEY":
                return OperationResult.fail(ErrorKind.NOT_FOUND, "Product not found")
            return OperationResult.fail(ErrorKind.INVALID, "User and product are required")
        except StoreError as e:
            logger.error(f"Error adding to wishlist: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to add to wishlist")

        return OperationResult.ok()

    def remove_from_wishlist(self, user_id: int, product_id: int) -> OperationResult:
        try:
            self.db.execute_update(
                "DELETE FROM wishlists WHERE user_id = ? AND product_id = ?",
                (user_id, product_id)
            )
        except StoreError as e:
            logger.error(f"Error removing from wishlist: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to remove from wishlist")

        return OperationResult.ok()

    def is_in_wishlist(self, user_id: int, product_id: int) -> bool:
        try:
            count = self.db.fetch_value(
                "SELECT COUNT(*) FROM wishlists WHERE user_id = ? AND product_id = ?",
                (user_id, product_id), default=0
            )
        except StoreError as e:
            logger.error(f"Error checking wishlist: {e}")
            raise
        return count > 0

    def get_wishlist_product_ids(self, user_id: int) -> List[int]:
        try:
            rows = self.db.execute_query("""
                SELECT product_id FROM wishlists
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
            """, (user_id,))
        except StoreError as e:
            logger.error(f"Error fetching wishlist ids: {e}")
            raise
        return [row["product_id"] for row in rows]

    def get_wishlist_products(self, user_id: int) -> List[Dict[str, Any]]:
        """Most recently added first"""
        try:
            return self.db.execute_query("""
                SELECT p.* FROM products p
                INNER JOIN wishlists w ON p.id = w.product_id
                WHERE w.user_id = ?
                ORDER BY w.created_at DESC, w.id DESC
            """, (user_id,))
        except StoreError as e:
            logger.error(f"Error fetching wishlist products: {e}")
            raise
