"""Payment strategies: credit card, PayPal, or cash on delivery.

Checks are deliberately shallow. A card number only has to be 16 characters
long and a PayPal email only has to contain ``@``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from orderflow.domain.order import Order

CARD_NUMBER_LENGTH = 16


class PaymentStrategy(ABC):
    """How an order is paid for.

    ``validate_payment`` must be called before ``process_payment``;
    ``process_payment`` assumes the order is valid and does not re-check.
    """

    name: ClassVar[str]
    label: ClassVar[str]

    @abstractmethod
    def validate_payment(self, order: Order) -> bool:
        """Return True if *order* carries what this payment needs."""

    @abstractmethod
    def process_payment(self, order: Order) -> None:
        """Carry out (simulate) the payment."""


class CreditCardPayment(PaymentStrategy):
    name = "credit-card"
    label = "Bank card, 16-character number"

    def validate_payment(self, order: Order) -> bool:
        number = order.credit_card_number
        return number is not None and len(number) == CARD_NUMBER_LENGTH

    def process_payment(self, order: Order) -> None:
        order.emit(f"Credit card payment: {order.credit_card_number}")


class PayPalPayment(PaymentStrategy):
    name = "paypal"
    label = "PayPal account email"

    def validate_payment(self, order: Order) -> bool:
        email = order.paypal_email
        return email is not None and "@" in email

    def process_payment(self, order: Order) -> None:
        order.emit(f"Redirecting to PayPal page: {order.paypal_email}")


class CashPayment(PaymentStrategy):
    """Cash on delivery; confirmed by the courier, so always accepted here."""

    name = "cash"
    label = "Cash on delivery"

    def validate_payment(self, order: Order) -> bool:
        return True

    def process_payment(self, order: Order) -> None:
        order.emit("Cash payment on delivery")
