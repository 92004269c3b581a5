"""
Checkout Service
The checkout screen's flow: summary with shipping fee, then place order.
The shipping fee is added once, by OrderService.create_order, so the
stored order total is the total the customer was shown.
"""

import logging
from typing import Any, Dict, Optional

from ..core.config import FurnituneConfig
from ..db import Database, db
from ..models import CheckoutRequest, OperationResult, PaymentMethod
from ..notifications import NotificationService
from .cart_service import CartService
from .order_service import OrderService

logger = logging.getLogger(__name__)


class CheckoutService:
    def __init__(self, database: Optional[Database] = None,
                 orders: Optional[OrderService] = None,
                 cart: Optional[CartService] = None,
                 notifications: Optional[NotificationService] = None,
                 shipping_fee: Optional[float] = None):
        self.db = database or db
        self.notifications = notifications or NotificationService(self.db)
        self.orders = orders or OrderService(self.db, self.notifications)
        self.cart = cart or CartService(self.db)
        self.shipping_fee = FurnituneConfig.get_shipping_fee() if shipping_fee is None else shipping_fee

    def get_checkout_summary(self, user_id: int) -> Dict[str, Any]:
        items = self.cart.get_cart_items(user_id)
        subtotal = round(sum(item["price"] * item["quantity"] for item in items), 2)
        return {
            "items": items,
            "subtotal": subtotal,
            "shipping_fee": self.shipping_fee,
            "total": round(subtotal + self.shipping_fee, 2),
        }

    def place_order(self, user_id: int, request: CheckoutRequest) -> OperationResult:
        """
        Create the order for a validated checkout request.

        Returns:
            Result whose data is {"order_id", "total"}
        """
        result = self.orders.create_order(
            user_id,
            request.to_shipping_blob(),
            request.payment_proof(),
            shipping_fee=self.shipping_fee,
        )
        if not result:
            return result

        order_id = result.data
        order = self.orders.get_order_by_id(order_id, user_id)
        total = order["total"]

        currency = FurnituneConfig.get_currency_symbol()
        self.notifications.notify(
            user_id,
            "Order Placed Successfully! 🎉",
            f"Your order #{order_id} has been placed. Total: {currency}{total:,.2f}. "
            f"Payment: {request.paymentMethod.label}",
            "order",
        )

        logger.info(f"Checkout complete for user {user_id}: order #{order_id} via {request.paymentMethod.value}")
        return OperationResult.ok(
            data={"order_id": order_id, "total": total},
            message=_success_message(request),
        )


def _success_message(request: CheckoutRequest) -> str:
    if request.paymentMethod == PaymentMethod.CARD:
        return "Payment processed! Your order has been confirmed."
    if request.paymentMethod == PaymentMethod.GCASH:
        return "GCash payment received! Your order has been confirmed."
    return "Order placed! Pay upon delivery."
