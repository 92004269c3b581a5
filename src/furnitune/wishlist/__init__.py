from .service import WishlistService

__all__ = ['WishlistService']
