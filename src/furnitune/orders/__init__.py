# Orders package
from .cart_service import CartService
from .order_service import OrderService, OrderStatus
from .checkout import CheckoutService

__all__ = ['CartService', 'OrderService', 'OrderStatus', 'CheckoutService']
