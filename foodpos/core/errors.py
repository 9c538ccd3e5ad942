# foodpos/core/errors.py
"""
Domain errors raised by the ordering services.

Every ``OrderingError`` is an expected, user-facing outcome: the API layer turns
it into a JSON error body with ``http_status``. ``PersistenceFailed`` is a
system fault and deliberately sits outside that hierarchy.
"""
from typing import Optional


class OrderingError(Exception):
    code = "ordering_error"
    http_status = 422

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.code)
        self.message = message or self.code


class CustomerNotFound(OrderingError):
    code = "customer_not_found"
    http_status = 404

    def __init__(self, customer_id):
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id


class EmptyOrder(OrderingError):
    code = "empty_order"

    def __init__(self):
        super().__init__("Order must contain at least one item")


class InvalidLine(OrderingError):
    code = "invalid_line"

    def __init__(self, index: int):
        super().__init__(f"Line {index + 1} has no menu item")
        self.index = index


class InvalidQuantity(OrderingError):
    code = "invalid_quantity"

    def __init__(self, quantity, max_quantity: int):
        super().__init__(f"Quantity must be between 1 and {max_quantity}, got {quantity}")
        self.quantity = quantity


class ItemNotFound(OrderingError):
    code = "item_not_found"
    http_status = 404

    def __init__(self, item_id):
        super().__init__(f"Menu item {item_id} not found")
        self.item_id = item_id


class InsufficientStock(OrderingError):
    code = "insufficient_stock"
    http_status = 409

    def __init__(self, item_name: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for {item_name}: {available} available, {requested} requested"
        )
        self.item_name = item_name
        self.available = available
        self.requested = requested


class PriceMismatch(OrderingError):
    code = "price_mismatch"
    http_status = 409

    def __init__(self, item_name: str, expected, claimed):
        super().__init__(
            f"Subtotal for {item_name} should be {expected}, got {claimed}"
        )
        self.item_name = item_name
        self.expected = expected
        self.claimed = claimed


class PaymentFailed(OrderingError):
    code = "payment_failed"
    http_status = 402

    def __init__(self, reason: str):
        super().__init__(f"Payment failed: {reason}")
        self.reason = reason


class InvalidCredential(PaymentFailed):
    code = "invalid_credential"

    def __init__(self):
        super().__init__("invalid payment credentials")


class InsufficientFunds(PaymentFailed):
    code = "insufficient_funds"

    def __init__(self, required, available):
        super().__init__(f"insufficient balance ({available} available, {required} required)")
        self.required = required
        self.available = available


class UnsupportedPaymentType(PaymentFailed):
    code = "unsupported_payment_type"
    http_status = 422

    def __init__(self, payment_type):
        super().__init__(f"unsupported payment type {payment_type!r}")
        self.payment_type = payment_type


class StockUpdateFailed(OrderingError):
    code = "stock_update_failed"
    http_status = 409

    def __init__(self, item_name: str):
        super().__init__(f"Could not reserve stock for {item_name}")
        self.item_name = item_name


class PaymentMethodNotFound(OrderingError):
    code = "payment_method_not_found"
    http_status = 404

    def __init__(self, identifier):
        super().__init__(f"Payment method {identifier} not found")
        self.identifier = identifier


class PersistenceFailed(Exception):
    """A store write failed or was rejected; the surrounding transaction is rolled back."""
