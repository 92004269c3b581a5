# Models package
from .results import ErrorKind, OperationResult
from .checkout import (
    PaymentMethod, CardDetails, GcashDetails, CheckoutRequest, parse_shipping_blob
)

__all__ = [
    'ErrorKind', 'OperationResult',
    'PaymentMethod', 'CardDetails', 'GcashDetails', 'CheckoutRequest', 'parse_shipping_blob',
]
