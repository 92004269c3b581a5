"""
Furnitune - local SQLite data layer for the furniture storefront app.
"""

from .utils.logger_config import setup_logger
from .db import Database, StoreError, ConstraintError, create_database
from .models import ErrorKind, OperationResult
from .storefront import Storefront

logger = setup_logger()

__all__ = [
    'Database', 'StoreError', 'ConstraintError', 'create_database',
    'ErrorKind', 'OperationResult', 'Storefront',
]
