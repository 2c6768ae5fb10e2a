"""Product value object."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class Product(BaseModel):
    """A catalog entry referenced by orders.

    Frozen after construction, so one instance can be shared read-only
    between any number of orders.
    """

    model_config = {"frozen": True}

    name: str
    price: Decimal

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
