"""
User Authentication Service
Plain email/password lookup against the users table (no hashing)
"""

import logging
from typing import Optional

from ..db import ConstraintError, Database, StoreError, db
from ..models import ErrorKind, OperationResult

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    def __init__(self, database: Optional[Database] = None):
        self.db = database or db

    def login(self, email: str, password: str) -> OperationResult:
        """
        Authenticate by exact email and password match.

        Returns:
            Result whose data is the full user row (password included).
            Unknown email and wrong password fail the same way.
        """
        try:
            user = self.db.fetch_one(
                "SELECT * FROM users WHERE email = ? AND password = ?",
                (email, password)
            )
        except StoreError as e:
            logger.error(f"Login error: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "An error occurred during login")

        if not user:
            return OperationResult.fail(ErrorKind.NOT_FOUND, INVALID_CREDENTIALS)

        logger.info(f"User logged in: {email} (ID: {user['id']})")
        return OperationResult.ok(data=user, message="Login successful")

    def register(self, email: str, password: str, name: str,
                 phone: Optional[str] = None) -> OperationResult:
        """Register a new user and return the freshly stored row"""
        try:
            existing = self.db.fetch_value(
                "SELECT COUNT(*) FROM users WHERE email = ?", (email,), default=0
            )
            if existing:
                return OperationResult.fail(ErrorKind.CONFLICT, "Email already registered")

            user_id = self.db.execute_insert(
                "INSERT INTO users (email, password, name, phone) VALUES (?, ?, ?, ?)",
                (email, password, name, phone or None)
            )
            user = self.db.fetch_one("SELECT * FROM users WHERE id = ?", (user_id,))
        except ConstraintError as e:
            if e.constraint == "NOT NULL":
                return OperationResult.fail(ErrorKind.INVALID, "Email, password and name are required")
            return OperationResult.fail(ErrorKind.CONFLICT, "Email already registered")
        except StoreError as e:
            logger.error(f"Registration error: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "An error occurred during registration")

        logger.info(f"[OK] User registered: {email} (ID: {user_id})")
        return OperationResult.ok(data=user, message="Registration successful")

    def change_password(self, user_id: int, old_password: str, new_password: str) -> OperationResult:
        """Overwrite the password after re-checking the current one"""
        try:
            current = self.db.fetch_one(
                "SELECT id FROM users WHERE id = ? AND password = ?",
                (user_id, old_password)
            )
            if not current:
                return OperationResult.fail(ErrorKind.INVALID, "Current password is incorrect")

            self.db.execute_update(
                "UPDATE users SET password = ? WHERE id = ?",
                (new_password, user_id)
            )
        except StoreError as e:
            logger.error(f"Change password error: {e}")
            return OperationResult.fail(ErrorKind.INTERNAL, "Failed to change password")

        return OperationResult.ok(message="Password changed")
