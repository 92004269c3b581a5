from .service import ReviewService

__all__ = ['ReviewService']
