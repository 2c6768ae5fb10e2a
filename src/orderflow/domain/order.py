"""Order aggregate and its processing pipeline.

``Order.process_order`` runs one strictly ordered, short-circuiting pass:

1. products present
2. payment strategy validates
3. delivery strategy validates
4. payment strategy executes
5. delivery strategy executes
6. success reported with the order ID

The first failed check aborts the run with no further steps and no rollback.
Strategies only read the order's auxiliary fields; they report what they did
through :meth:`Order.emit`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import TYPE_CHECKING

from orderflow.domain.errors import (
    DeliveryValidationError,
    EmptyOrderError,
    OrderProcessingError,
    PaymentValidationError,
)
from orderflow.domain.ids import generate_order_id
from orderflow.domain.lifecycle import OrderState, is_valid_transition

if TYPE_CHECKING:
    from orderflow.domain.products import Product
    from orderflow.strategies.delivery import DeliveryStrategy
    from orderflow.strategies.payment import PaymentStrategy

logger = logging.getLogger(__name__)


class Order:
    """One purchase: products plus the chosen delivery and payment strategies.

    The ID and product list are fixed at construction. The auxiliary fields
    (``delivery_address``, ``post_office``, ``credit_card_number``,
    ``paypal_email``) are plain attributes that may be set any time before
    processing; the attached strategies decide which of them must be present.

    Args:
        products: Products in the order. ``None`` and empty are accepted here
            and rejected by :meth:`process_order`.
        delivery_strategy: Selected delivery variant.
        payment_strategy: Selected payment variant.
        echo: Optional sink that receives every emitted line as it happens.
    """

    def __init__(
        self,
        products: Iterable[Product] | None,
        delivery_strategy: DeliveryStrategy,
        payment_strategy: PaymentStrategy,
        *,
        delivery_address: str | None = None,
        post_office: str | None = None,
        credit_card_number: str | None = None,
        paypal_email: str | None = None,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self._order_id = generate_order_id()
        self._products: tuple[Product, ...] | None = (
            tuple(products) if products is not None else None
        )
        self.delivery_strategy = delivery_strategy
        self.payment_strategy = payment_strategy

        self.delivery_address = delivery_address
        self.post_office = post_office
        self.credit_card_number = credit_card_number
        self.paypal_email = paypal_email

        self.echo = echo
        self.state: OrderState = OrderState.CREATED
        self.messages: list[str] = []
        self.failure: OrderProcessingError | None = None

    def __repr__(self) -> str:
        return (
            f"Order(id={self._order_id!r}, "
            f"delivery={type(self.delivery_strategy).__name__}, "
            f"payment={type(self.payment_strategy).__name__}, "
            f"state={self.state.value!r})"
        )

    @property
    def order_id(self) -> str:
        return self._order_id

    @property
    def products(self) -> tuple[Product, ...] | None:
        return self._products

    @property
    def total(self) -> Decimal:
        """Sum of product prices (zero for an empty order)."""
        return sum((p.price for p in self._products or ()), Decimal(0))

    def emit(self, message: str) -> None:
        """Record a processing message and forward it to the echo sink."""
        self.messages.append(message)
        logger.debug("order %s: %s", self._order_id, message)
        if self.echo is not None:
            self.echo(message)

    def process_order(self) -> bool:
        """Validate, pay and deliver. Returns True on success.

        Validation failures never propagate: they are reported through
        :meth:`emit`, stored on :attr:`failure`, and the run ends in
        ``failed``.
        """
        self._start_run()
        try:
            self._check_products()
            if not self.payment_strategy.validate_payment(self):
                raise PaymentValidationError()
            self._advance(OrderState.PAYMENT_VALIDATED)
            if not self.delivery_strategy.validate_delivery(self):
                raise DeliveryValidationError()
            self._advance(OrderState.DELIVERY_VALIDATED)
        except OrderProcessingError as exc:
            self.failure = exc
            self.emit(exc.message)
            self._advance(OrderState.FAILED)
            return False

        self.payment_strategy.process_payment(self)
        self._advance(OrderState.PAYMENT_PROCESSED)
        self.delivery_strategy.process_delivery(self)
        self._advance(OrderState.DELIVERY_PROCESSED)

        self.emit(f"Order {self._order_id} processed successfully")
        self._advance(OrderState.COMPLETED)
        return True

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _start_run(self) -> None:
        self.state = OrderState.CREATED
        self.messages = []
        self.failure = None

    def _check_products(self) -> None:
        if not self._products:
            raise EmptyOrderError()
        self._advance(OrderState.PRODUCTS_CHECKED)

    def _advance(self, target: OrderState) -> None:
        if not is_valid_transition(self.state, target):
            msg = f"Illegal order transition {self.state} -> {target}"
            raise RuntimeError(msg)
        self.state = target
