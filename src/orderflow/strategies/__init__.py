"""Interchangeable delivery and payment strategies.

Strategies are stateless: every decision is a function of the order
passed in. They may import from the domain layer only.
"""

from orderflow.strategies.delivery import CourierDelivery, DeliveryStrategy, PostDelivery
from orderflow.strategies.payment import (
    CashPayment,
    CreditCardPayment,
    PaymentStrategy,
    PayPalPayment,
)

__all__ = [
    "CashPayment",
    "CourierDelivery",
    "CreditCardPayment",
    "DeliveryStrategy",
    "PayPalPayment",
    "PaymentStrategy",
    "PostDelivery",
]
