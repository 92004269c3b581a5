"""
Cart Service
Cart lines pending checkout. Every add creates a new line; lines for the
same product/colour/size are not merged.
"""

import logging
from typing import Any, Dict, List, Optional

from ..db import ConstraintError, Database, StoreError, db
from ..models import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

CART_ITEMS_QUERY = """
    SELECT
        cart.id,
        cart.product_id,
        cart.quantity,
        cart.selected_color,
        cart.selected_size,
        products.name,
        products.price,
        products.image_url
    FROM cart
    JOIN products ON cart.product_id = products.id
    WHERE cart.user_id = ?
    ORDER BY cart.id
"""


class CartService:
    def __init__(self, database: Optional[Database] = None):
        self.db = database or db

    def add_to_cart(self, user_id: int, product_id: int, quantity: int = 1,
                    selected_color: Optional[str] = None,
                    selected_size: Optional[str] = None) -> OperationResult:
        """Insert a cart line; data is the new line id"""
        if quantity < 1:
            return OperationResult.fail(ErrorKind.INVALID, "Quantity must be at least 1")

        try:
            cart_id = self.db.execute_insert("""
                INSERT INTO cart (user_id, product_id, quantity, selected_color, selected_size)
                VALUES (?, ?, ?, ?, ?)
            """, (user_id, product_id, quantity, selected_color or None, selected_size or None))
        except ConstraintError as e:
            if e.constraint == "FOREIGN KEY":
                return OperationResult.fail(ErrorKind.NOT_FOUND, "Product not found")
            return OperationResult.fail(ErrorKind.INVALID, "User and product are required")
        except StoreError as e:
            logger.error(f"Error adding to cart: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to add to cart")

        return OperationResult.ok(data=cart_id, message="Added to cart")

    def get_cart_items(self, user_id: int) -> List[Dict[str, Any]]:
        try:
            return self.db.execute_query(CART_ITEMS_QUERY, (user_id,))
        except StoreError as e:
            logger.error(f"Error loading cart: {e}")
            raise

    def get_cart_subtotal(self, user_id: int) -> float:
        """Sum of price x quantity over every line, duplicates included"""
        items = self.get_cart_items(user_id)
        return round(sum(item["price"] * item["quantity"] for item in items), 2)

    def get_cart_count(self, user_id: int) -> int:
        try:
            return self.db.fetch_value(
                "SELECT COUNT(*) FROM cart WHERE user_id = ?", (user_id,), default=0
            )
        except StoreError as e:
            logger.error(f"Error counting cart lines: {e}")
            raise

    def update_quantity(self, cart_id: int, user_id: int, quantity: int) -> OperationResult:
        if quantity < 1:
            return OperationResult.fail(ErrorKind.INVALID, "Quantity must be at least 1")

        try:
            rows = self.db.execute_update(
                "UPDATE cart SET quantity = ? WHERE id = ? AND user_id = ?",
                (quantity, cart_id, user_id)
            )
        except StoreError as e:
            logger.error(f"Error updating quantity: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to update quantity")

        if rows == 0:
            return OperationResult.fail(ErrorKind.NOT_FOUND, "Cart item not found")
        return OperationResult.ok()

    def remove_item(self, cart_id: int, user_id: int) -> OperationResult:
        try:
            rows = self.db.execute_update(
                "DELETE FROM cart WHERE id = ? AND user_id = ?", (cart_id, user_id)
            )
        except StoreError as e:
            logger.error(f"Error removing cart item: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to remove item")

        if rows == 0:
            return OperationResult.fail(ErrorKind.NOT_FOUND, "Cart item not found")
        return OperationResult.ok(message="Item removed from cart")

    def clear_cart(self, user_id: int) -> OperationResult:
        try:
            rows = self.db.execute_update("DELETE FROM cart WHERE user_id = ?", (user_id,))
        except StoreError as e:
            logger.error(f"Error clearing cart: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to clear cart")

        return OperationResult.ok(data=rows)
