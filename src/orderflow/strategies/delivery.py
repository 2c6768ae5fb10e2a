"""Delivery strategies: courier to an address, or post to a post office."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from orderflow.domain.order import Order


class DeliveryStrategy(ABC):
    """How an order reaches the customer.

    ``validate_delivery`` must be called before ``process_delivery``;
    ``process_delivery`` assumes the order is valid and does not re-check.
    """

    name: ClassVar[str]
    label: ClassVar[str]

    @abstractmethod
    def validate_delivery(self, order: Order) -> bool:
        """Return True if *order* carries what this delivery needs."""

    @abstractmethod
    def process_delivery(self, order: Order) -> None:
        """Carry out (simulate) the delivery."""


class CourierDelivery(DeliveryStrategy):
    """Courier to the order's delivery address."""

    name = "courier"
    label = "Courier to a street address"

    def validate_delivery(self, order: Order) -> bool:
        return bool(order.delivery_address)

    def process_delivery(self, order: Order) -> None:
        order.emit(f"Courier delivery to address: {order.delivery_address}")


class PostDelivery(DeliveryStrategy):
    """Postal delivery to the order's post office."""

    name = "post"
    label = "Pickup at a post office"

    def validate_delivery(self, order: Order) -> bool:
        return bool(order.post_office)

    def process_delivery(self, order: Order) -> None:
        order.emit(f"Post delivery to office: {order.post_office}")
