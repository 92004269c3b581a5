"""
Profile Service - User profile management
Handles personal info, profile image and account stats
"""

import logging
from typing import Any, Dict, Optional

from ..db import ConstraintError, Database, StoreError, db
from ..models import ErrorKind, OperationResult

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for managing user profiles"""

    def __init__(self, database: Optional[Database] = None):
        self.db = database or db

    def get_user_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        try:
            return self.db.fetch_one("SELECT * FROM users WHERE id = ?", (user_id,))
        except StoreError as e:
            logger.error(f"Get user error: {e}")
            raise

    def update_profile(self, user_id: int, name: str, phone: Optional[str] = None,
                       email: Optional[str] = None,
                       profile_image: Optional[str] = None) -> OperationResult:
        """
        Overwrite name and phone; email and profile image only when given.
        profile_image may be a data URI or a relative asset path.
        """
        updates = ["name = ?", "phone = ?"]
        params = [name, phone or None]

        if email is not None:
            updates.append("email = ?")
            params.append(email)

        if profile_image is not None:
            updates.append("profile_image = ?")
            params.append(profile_image)

        params.append(user_id)
        query = f"UPDATE users SET {', '.join(updates)} WHERE id = ?"

        try:
            rows = self.db.execute_update(query, tuple(params))
        except ConstraintError as e:
            if e.constraint == "UNIQUE":
                return OperationResult.fail(ErrorKind.CONFLICT, "Email already registered")
            if e.constraint == "NOT NULL":
                return OperationResult.fail(ErrorKind.INVALID, "Name and email are required")
            logger.error(f"Update profile error: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to update profile")
        except StoreError as e:
            logger.error(f"Update profile error: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to update profile")

        if rows == 0:
            return OperationResult.fail(ErrorKind.NOT_FOUND, "User not found")
        return OperationResult.ok(message="Profile updated")

    def get_profile_stats(self, user_id: int) -> Dict[str, int]:
        """Counts shown on the profile screen"""
        try:
            row = self.db.fetch_one("""
                SELECT
                    (SELECT COUNT(*) FROM orders WHERE user_id = ?) AS total_orders,
                    (SELECT COUNT(*) FROM reviews WHERE user_id = ?) AS total_reviews,
                    (SELECT COUNT(*) FROM cart WHERE user_id = ?) AS cart_items
            """, (user_id, user_id, user_id))
        except StoreError as e:
            logger.error(f"Error loading profile stats: {e}")
            raise

        return row
