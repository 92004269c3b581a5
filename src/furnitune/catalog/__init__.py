from .product_service import ProductService, CATEGORIES

__all__ = ['ProductService', 'CATEGORIES']
