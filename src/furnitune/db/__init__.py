# Database package
from .connection import Database, StoreError, ConstraintError, db
from .schema import create_database, create_tables, add_column_if_missing
from .seed import seed_data

__all__ = [
    'Database', 'StoreError', 'ConstraintError', 'db',
    'create_database', 'create_tables', 'add_column_if_missing', 'seed_data',
]
