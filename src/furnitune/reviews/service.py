"""
Review Service
One review per user and product; every write or delete recomputes the
product's rating_avg / reviews_count in the same transaction.
"""

import logging
from typing import Any, Dict, List, Optional

from ..catalog import ProductService
from ..db import ConstraintError, Database, StoreError, db
from ..models import ErrorKind, OperationResult

logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, database: Optional[Database] = None,
                 products: Optional[ProductService] = None):
        self.db = database or db
        self.products = products or ProductService(self.db)

    def create_review(self, user_id: int, product_id: int, rating: int,
                      message: Optional[str] = None,
                      order_id: Optional[int] = None) -> OperationResult:
        """
        Insert the user's review of a product, or update it in place if one
        exists. The rating range is enforced by the table's CHECK constraint.
        """
        try:
            with self.db.transaction():
                existing = self.db.fetch_one(
                    "SELECT id FROM reviews WHERE user_id = ? AND product_id = ?",
                    (user_id, product_id)
                )

                if existing:
                    review_id = existing["id"]
                    self.db.execute_update(
                        "UPDATE reviews SET rating = ?, message = ? WHERE id = ?",
                        (rating, message or None, review_id)
                    )
                else:
                    review_id = self.db.execute_insert("""
                        INSERT INTO reviews (user_id, product_id, order_id, rating, message)
                        VALUES (?, ?, ?, ?, ?)
                    """, (user_id, product_id, order_id, rating, message or None))

                self.products.update_product_rating(product_id)
        except ConstraintError as e:
            if e.constraint in ("CHECK", "NOT NULL"):
                return OperationResult.fail(ErrorKind.INVALID, "Rating must be a whole number from 1 to 5")
            if e.constraint == "FOREIGN KEY":
                return OperationResult.fail(ErrorKind.NOT_FOUND, "Product, user or order not found")
            logger.error(f"Error creating review: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to save review")
        except StoreError as e:
            logger.error(f"Error creating review: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to save review")

        return OperationResult.ok(data=review_id, message="Review saved")

    def get_product_reviews(self, product_id: int) -> List[Dict[str, Any]]:
        try:
            return self.db.execute_query("""
                SELECT reviews.*, users.name AS user_name
                FROM reviews
                JOIN users ON reviews.user_id = users.id
                WHERE reviews.product_id = ?
                ORDER BY reviews.created_at DESC, reviews.id DESC
            """, (product_id,))
        except StoreError as e:
            logger.error(f"Error getting product reviews: {e}")
            raise

    def get_user_reviews(self, user_id: int) -> List[Dict[str, Any]]:
        try:
            return self.db.execute_query("""
                SELECT reviews.*, products.name AS product_name, products.image_url AS product_image
                FROM reviews
                JOIN products ON reviews.product_id = products.id
                WHERE reviews.user_id = ?
                ORDER BY reviews.created_at DESC, reviews.id DESC
            """, (user_id,))
        except StoreError as e:
            logger.error(f"Error getting user reviews: {e}")
            raise

    def get_user_product_review(self, user_id: int, product_id: int) -> Optional[Dict[str, Any]]:
        try:
            return self.db.fetch_one(
                "SELECT * FROM reviews WHERE user_id = ? AND product_id = ?",
                (user_id, product_id)
            )
        except StoreError as e:
            logger.error(f"Error getting user product review: {e}")
            raise

    def can_user_review(self, user_id: int, product_id: int) -> bool:
        """True only if the user has a completed order containing the product"""
        try:
            row = self.db.fetch_one("""
                SELECT order_items.id
                FROM order_items
                JOIN orders ON order_items.order_id = orders.id
                WHERE orders.user_id = ?
                  AND order_items.product_id = ?
                  AND orders.status = 'completed'
                LIMIT 1
            """, (user_id, product_id))
        except StoreError as e:
            logger.error(f"Error checking review permission: {e}")
            raise
        return row is not None

    def delete_review(self, review_id: int, user_id: int) -> OperationResult:
        try:
            with self.db.transaction():
                review = self.db.fetch_one(
                    "SELECT product_id FROM reviews WHERE id = ? AND user_id = ?",
                    (review_id, user_id)
                )
                if not review:
                    return OperationResult.fail(ErrorKind.NOT_FOUND, "Review not found")

                self.db.execute_update(
                    "DELETE FROM reviews WHERE id = ? AND user_id = ?", (review_id, user_id)
                )
                self.products.update_product_rating(review["product_id"])
        except StoreError as e:
            logger.error(f"Error deleting review: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to delete review")

        return OperationResult.ok(message="Review deleted")

    def get_rating_distribution(self, product_id: int) -> Dict[int, int]:
        """Count per star value, every bucket from 1 to 5 present"""
        distribution = {rating: 0 for rating in range(1, 6)}
        try:
            rows = self.db.execute_query("""
                SELECT rating, COUNT(*) AS count
                FROM reviews
                WHERE product_id = ?
                GROUP BY rating
            """, (product_id,))
        except StoreError as e:
            logger.error(f"Error getting rating distribution: {e}")
            raise

        for row in rows:
            distribution[row["rating"]] = row["count"]
        return distribution
