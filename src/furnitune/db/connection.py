"""
Database connection and helper functions for SQLite
"""

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Dict, List, Any, Union
from contextlib import contextmanager

from ..core.config import FurnituneConfig

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """An unexpected database failure"""


class ConstraintError(StoreError):
    """A UNIQUE, CHECK, NOT NULL or FOREIGN KEY constraint rejected a write"""

    KINDS = ("UNIQUE", "CHECK", "NOT NULL", "FOREIGN KEY")

    @property
    def constraint(self) -> Optional[str]:
        """Which kind of constraint failed, read from SQLite's message"""
        message = str(self).upper()
        for kind in self.KINDS:
            if message.startswith(kind):
                return kind
        return None


class Database:
    def __init__(self, db_path: Optional[Union[str, Path]] = None, seed: Optional[bool] = None):
        self.db_path = db_path or FurnituneConfig.get_database_path()
        self.seed = FurnituneConfig.seed_enabled() if seed is None else seed
        self._conn: Optional[sqlite3.Connection] = None
        self._depth = 0

    def get_connection(self) -> sqlite3.Connection:
        """Return the shared connection, opening and preparing it on first use"""
        if self._conn is None:
            self._conn = self._open()
        return self._conn

    def _open(self) -> sqlite3.Connection:
        # Imported here: schema imports this module for create_database()
        from .schema import create_tables
        from .seed import seed_data

        if str(self.db_path) != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        conn = None
        try:
            conn = sqlite3.connect(str(self.db_path))
            conn.row_factory = sqlite3.Row  # Return rows as dictionaries
            conn.execute("PRAGMA foreign_keys = ON")
            create_tables(conn)
            if self.seed:
                seed_data(conn)
        except sqlite3.Error as e:
            if conn is not None:
                conn.close()
            logger.error(f"Database initialization failed: {e}")
            raise StoreError(f"Database initialization failed: {e}") from e

        logger.info(f"Database ready at {self.db_path}")
        return conn

    def close(self):
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @contextmanager
    def transaction(self):
        """
        Context manager for a unit of work.
        Nested blocks join the outermost one, which commits or rolls back.
        """
        conn = self.get_connection()
        outermost = self._depth == 0
        self._depth += 1
        try:
            yield conn
            if outermost:
                conn.commit()
        except Exception:
            if outermost:
                conn.rollback()
            raise
        finally:
            self._depth -= 1

    def _execute(self, conn: sqlite3.Connection, query: str, params: tuple) -> sqlite3.Cursor:
        try:
            return conn.execute(query, params)
        except sqlite3.IntegrityError as e:
            raise ConstraintError(str(e)) from e
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def execute_query(self, query: str, params: tuple = ()) -> List[Dict[str, Any]]:
        """Execute SELECT query and return results"""
        with self.transaction() as conn:
            cursor = self._execute(conn, query, params)
            return [dict(row) for row in cursor.fetchall()]

    def execute_insert(self, query: str, params: tuple = ()) -> int:
        """Execute INSERT query and return last row ID"""
        with self.transaction() as conn:
            cursor = self._execute(conn, query, params)
            return cursor.lastrowid

    def execute_update(self, query: str, params: tuple = ()) -> int:
        """Execute UPDATE/DELETE query and return affected rows"""
        with self.transaction() as conn:
            cursor = self._execute(conn, query, params)
            return cursor.rowcount

    def fetch_one(self, query: str, params: tuple = ()) -> Optional[Dict[str, Any]]:
        """Fetch single row"""
        results = self.execute_query(query, params)
        return results[0] if results else None

    def fetch_value(self, query: str, params: tuple = (), default: Any = None) -> Any:
        """Fetch the first column of the first row"""
        row = self.fetch_one(query, params)
        if not row:
            return default
        value = next(iter(row.values()))
        return default if value is None else value


# Global database instance
db = Database()
