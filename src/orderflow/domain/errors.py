"""Order processing error taxonomy.

All errors are non-fatal: ``Order.process_order`` raises them internally,
catches them at its own boundary, and reports a boolean outcome.
"""

from __future__ import annotations

from typing import ClassVar


class OrderProcessingError(Exception):
    """Base class for a validation failure that aborts a processing run."""

    code: ClassVar[str] = "ORDER_FAILED"
    default_message: ClassVar[str] = "Order processing failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyOrderError(OrderProcessingError):
    """The order has no products."""

    code = "EMPTY_ORDER"
    default_message = "Error: empty order"


class PaymentValidationError(OrderProcessingError):
    """The payment strategy rejected the order's payment details."""

    code = "PAYMENT_VALIDATION_FAILED"
    default_message = "Payment validation failed"


class DeliveryValidationError(OrderProcessingError):
    """The delivery strategy rejected the order's delivery details."""

    code = "DELIVERY_VALIDATION_FAILED"
    default_message = "Delivery validation failed"
