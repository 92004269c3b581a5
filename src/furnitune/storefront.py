"""
Storefront - every service wired to one shared Database.
The UI shell owns one of these and passes the signed-in user's id into each call.
"""

from typing import Optional

from .auth import AuthService
from .catalog import ProductService
from .db import Database, db
from .notifications import NotificationService
from .orders import CartService, CheckoutService, OrderService
from .reviews import ReviewService
from .users import ProfileService
from .wishlist import WishlistService


class Storefront:
    def __init__(self, database: Optional[Database] = None, shipping_fee: Optional[float] = None):
        self.db = database or db
        self.notifications = NotificationService(self.db)
        self.auth = AuthService(self.db)
        self.profiles = ProfileService(self.db)
        self.products = ProductService(self.db)
        self.cart = CartService(self.db)
        self.orders = OrderService(self.db, self.notifications)
        self.checkout = CheckoutService(
            self.db, self.orders, self.cart, self.notifications, shipping_fee=shipping_fee
        )
        self.reviews = ReviewService(self.db, self.products)
        self.wishlist = WishlistService(self.db)

    def close(self):
        self.db.close()
