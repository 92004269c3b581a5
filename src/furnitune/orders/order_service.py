"""
Order Service
Turns a user's cart into an order, and tracks its status afterwards.

Status flow:
    processing -> completed   (set externally, e.g. by staff)
    processing -> cancelled   (by the customer)
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from ..db import Database, StoreError, db
from ..models import ErrorKind, OperationResult
from ..notifications import NotificationService
from ..utils.logger_config import log
from .cart_service import CART_ITEMS_QUERY

logger = logging.getLogger(__name__)

ORDER_ITEMS_QUERY = """
    SELECT
        order_items.*,
        products.name AS product_name,
        products.image_url
    FROM order_items
    LEFT JOIN products ON order_items.product_id = products.id
    WHERE order_items.order_id IN ({placeholders})
    ORDER BY order_items.id
"""

# Stays under SQLITE_MAX_VARIABLE_NUMBER on older builds (999)
ITEMS_BATCH_SIZE = 500


class OrderStatus(str, Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderService:
    def __init__(self, database: Optional[Database] = None,
                 notifications: Optional[NotificationService] = None):
        self.db = database or db
        self.notifications = notifications or NotificationService(self.db)

    def create_order(self, user_id: int, shipping_address: str,
                     payment_proof: Optional[str] = None,
                     shipping_fee: float = 0.0) -> OperationResult:
        """
        Create an order from the user's cart.

        The order row, its item snapshots and the cart clear are one
        transaction. Stored total = cart subtotal + shipping_fee.

        Returns:
            Result whose data is the new order id; EMPTY when the cart is empty
        """
        try:
            with self.db.transaction():
                cart_items = self.db.execute_query(CART_ITEMS_QUERY, (user_id,))
                if not cart_items:
                    return OperationResult.fail(ErrorKind.EMPTY, "Your cart is empty")

                subtotal = sum(item["price"] * item["quantity"] for item in cart_items)
                total = round(subtotal + shipping_fee, 2)

                order_id = self.db.execute_insert("""
                    INSERT INTO orders (user_id, total, status, shipping_address, payment_proof, shipping_fee)
                    VALUES (?, ?, ?, ?, ?, ?)
                """, (user_id, total, OrderStatus.PROCESSING.value, shipping_address,
                      payment_proof or "", shipping_fee))

                for item in cart_items:
                    self.db.execute_insert("""
                        INSERT INTO order_items
                            (order_id, product_id, quantity, price, selected_color, selected_size)
                        VALUES (?, ?, ?, ?, ?, ?)
                    """, (order_id, item["product_id"], item["quantity"], item["price"],
                          item["selected_color"], item["selected_size"]))

                self.db.execute_update("DELETE FROM cart WHERE user_id = ?", (user_id,))
        except StoreError as e:
            log(logger, 'error', f"Error creating order for user {user_id}: {e}", 'ORDERS', 'CREATE')
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to create order")

        log(logger, 'info', f"[OK] Order #{order_id} created for user {user_id}: "
                            f"{len(cart_items)} items, total {total}", 'ORDERS', 'CREATE')

        self.notifications.notify(
            user_id,
            "Order Received",
            f"Your order #{order_id} was received and is now processing.",
            "order",
        )
        return OperationResult.ok(data=order_id, message="Order created")

    def _attach_items(self, orders: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Load items for all given orders, one query per batch of ids"""
        if not orders:
            return orders

        ids = [order["id"] for order in orders]
        by_order: Dict[int, List[Dict[str, Any]]] = {order_id: [] for order_id in ids}

        for start in range(0, len(ids), ITEMS_BATCH_SIZE):
            batch = ids[start:start + ITEMS_BATCH_SIZE]
            placeholders = ", ".join("?" for _ in batch)
            items = self.db.execute_query(ORDER_ITEMS_QUERY.format(placeholders=placeholders), tuple(batch))
            for item in items:
                by_order[item["order_id"]].append(item)

        for order in orders:
            order["items"] = by_order[order["id"]]
        return orders

    def get_user_orders(self, user_id: int) -> List[Dict[str, Any]]:
        """All orders for a user, newest first, each with its items"""
        try:
            orders = self.db.execute_query("""
                SELECT * FROM orders
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
            """, (user_id,))
            return self._attach_items(orders)
        except StoreError as e:
            logger.error(f"Error getting orders for user {user_id}: {e}")
            raise

    def get_order_by_id(self, order_id: int, user_id: int) -> Optional[Dict[str, Any]]:
        """Single order with items, only if it belongs to user_id"""
        try:
            order = self.db.fetch_one(
                "SELECT * FROM orders WHERE id = ? AND user_id = ?", (order_id, user_id)
            )
            if not order:
                return None
            return self._attach_items([order])[0]
        except StoreError as e:
            logger.error(f"Error getting order {order_id}: {e}")
            raise

    def update_order_status(self, order_id: int, status: str) -> OperationResult:
        """
        Overwrite the status. Only the value is checked, not whether the
        transition makes sense.
        """
        try:
            status = OrderStatus(status)
        except ValueError:
            return OperationResult.fail(ErrorKind.INVALID, f"Unknown order status: {status}")

        try:
            order = self.db.fetch_one("SELECT user_id FROM orders WHERE id = ?", (order_id,))
            if not order:
                return OperationResult.fail(ErrorKind.NOT_FOUND, "Order not found")

            self.db.execute_update(
                "UPDATE orders SET status = ? WHERE id = ?", (status.value, order_id)
            )
        except StoreError as e:
            logger.error(f"Error updating order {order_id} status: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to update order status")

        log(logger, 'info', f"Order #{order_id} status -> {status.value}", 'ORDERS', 'STATUS')
        self.notifications.notify(
            order["user_id"],
            "Order Status Updated",
            f"Your order #{order_id} status is now: {status.value}",
            "order-status",
        )
        return OperationResult.ok()

    def cancel_order(self, order_id: int, user_id: int) -> OperationResult:
        """Customer cancellation; only allowed while the order is processing"""
        try:
            with self.db.transaction():
                order = self.db.fetch_one(
                    "SELECT status FROM orders WHERE id = ? AND user_id = ?", (order_id, user_id)
                )
                if not order:
                    return OperationResult.fail(ErrorKind.NOT_FOUND, "Order not found")

                if order["status"] != OrderStatus.PROCESSING.value:
                    return OperationResult.fail(
                        ErrorKind.CONFLICT, f"Order is already {order['status']}"
                    )

                self.db.execute_update(
                    "UPDATE orders SET status = ? WHERE id = ?",
                    (OrderStatus.CANCELLED.value, order_id)
                )
        except StoreError as e:
            logger.error(f"Error cancelling order {order_id}: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to cancel order")

        log(logger, 'info', f"Order #{order_id} cancelled by user {user_id}", 'ORDERS', 'CANCEL')
        self.notifications.notify(
            user_id,
            "Order Cancelled",
            f"Your order #{order_id} has been cancelled. If this is a mistake contact support.",
            "order-status",
        )
        return OperationResult.ok(message="Order cancelled")

    def get_order_stats(self, user_id: int) -> Dict[str, int]:
        try:
            return self.db.fetch_one("""
                SELECT
                    COUNT(*) AS total,
                    COALESCE(SUM(CASE WHEN status = 'processing' THEN 1 ELSE 0 END), 0) AS processing,
                    COALESCE(SUM(CASE WHEN status = 'completed' THEN 1 ELSE 0 END), 0) AS completed,
                    COALESCE(SUM(CASE WHEN status = 'cancelled' THEN 1 ELSE 0 END), 0) AS cancelled
                FROM orders
                WHERE user_id = ?
            """, (user_id,))
        except StoreError as e:
            logger.error(f"Error getting order stats: {e}")
            raise
