"""
Notification Service
Append-only inbox rows with a read flag
"""

import logging
from typing import Dict, List, Optional

from ..db import Database, StoreError, db
from ..models import ErrorKind, OperationResult

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for the per-user notification inbox"""

    def __init__(self, database: Optional[Database] = None):
        self.db = database or db

    def notify(self, user_id: int, title: str, body: str, type: str = "general") -> Optional[int]:
        """
        Best-effort insert used as a side effect by other flows.
        Failures are logged and never raised.

        Returns:
            The notification id, or None if the insert failed
        """
        try:
            return self.db.execute_insert(
                "INSERT INTO notifications (user_id, title, body, type) VALUES (?, ?, ?, ?)",
                (user_id, title, body, type)
            )
        except StoreError as e:
            logger.error(f"Failed to create '{type}' notification for user {user_id}: {e}")
            return None

    def get_user_notifications(self, user_id: int) -> List[Dict]:
        """Newest first"""
        try:
            return self.db.execute_query("""
                SELECT * FROM notifications
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
            """, (user_id,))
        except StoreError as e:
            logger.error(f"Error loading notifications for user {user_id}: {e}")
            raise

    def get_unread_count(self, user_id: int) -> int:
        try:
            return self.db.fetch_value(
                "SELECT COUNT(*) FROM notifications WHERE user_id = ? AND is_read = 0",
                (user_id,), default=0
            )
        except StoreError as e:
            logger.error(f"Error counting unread notifications for user {user_id}: {e}")
            raise

    def mark_as_read(self, notification_id: int, user_id: int) -> OperationResult:
        try:
            rows = self.db.execute_update(
                "UPDATE notifications SET is_read = 1 WHERE id = ? AND user_id = ?",
                (notification_id, user_id)
            )
        except StoreError as e:
            logger.error(f"Error marking notification {notification_id} as read: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to update notification")

        if rows == 0:
            return OperationResult.fail(ErrorKind.NOT_FOUND, "Notification not found")
        return OperationResult.ok()

    def mark_all_as_read(self, user_id: int) -> OperationResult:
        try:
            rows = self.db.execute_update(
                "UPDATE notifications SET is_read = 1 WHERE user_id = ? AND is_read = 0",
                (user_id,)
            )
        except StoreError as e:
            logger.error(f"Error marking notifications as read for user {user_id}: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to update notifications")

        return OperationResult.ok(data=rows, message="All notifications marked as read")

    def delete_notification(self, notification_id: int, user_id: int) -> OperationResult:
        try:
            rows = self.db.execute_update(
                "DELETE FROM notifications WHERE id = ? AND user_id = ?",
                (notification_id, user_id)
            )
        except StoreError as e:
            logger.error(f"Error deleting notification {notification_id}: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to delete notification")

        if rows == 0:
            return OperationResult.fail(ErrorKind.NOT_FOUND, "Notification not found")
        return OperationResult.ok(message="Notification deleted")
