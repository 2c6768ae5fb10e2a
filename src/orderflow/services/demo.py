"""Demo driver: a fixed catalog and two example orders.

``courier-card`` pays by card and ships by courier, and succeeds.
``post-paypal`` pays by PayPal and ships by post without a post office,
so it stops at delivery validation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from orderflow.domain.order import Order
from orderflow.domain.products import Product
from orderflow.services.base import BaseService
from orderflow.services.orders import OrderService
from orderflow.services.result import ServiceResult
from orderflow.strategies.registry import create_delivery, create_payment

CATALOG: tuple[Product, ...] = (
    Product(name="Laptop", price=25000),
    Product(name="Headphones", price=3000),
)


@dataclass(frozen=True)
class Scenario:
    """One demo order: which strategies to attach and which fields to fill."""

    name: str
    delivery: str
    payment: str
    delivery_address: str | None = None
    post_office: str | None = None
    credit_card_number: str | None = None
    paypal_email: str | None = None

    def build(self, echo: Callable[[str], None] | None = None) -> Order:
        order = Order(
            CATALOG,
            create_delivery(self.delivery),
            create_payment(self.payment),
            echo=echo,
        )
        order.delivery_address = self.delivery_address
        order.post_office = self.post_office
        order.credit_card_number = self.credit_card_number
        order.paypal_email = self.paypal_email
        return order


SCENARIOS: dict[str, Scenario] = {
    "courier-card": Scenario(
        name="courier-card",
        delivery="courier",
        payment="credit-card",
        delivery_address="10 Victory St.",
        credit_card_number="1234567890123456",
    ),
    "post-paypal": Scenario(
        name="post-paypal",
        delivery="post",
        payment="paypal",
        paypal_email="user@example.com",
    ),
}


class DemoService(BaseService):
    """Run the demo scenarios one after another."""

    def run(
        self,
        names: list[str] | None = None,
        *,
        echo: Callable[[str], None] | None = None,
        on_result: Callable[[Scenario, ServiceResult], None] | None = None,
        separator: str | None = None,
    ) -> ServiceResult:
        """Process the selected scenarios in order (all of them by default).

        *echo* receives the orders' processing messages, *on_result* each
        order's result, and *separator* is echoed between runs. Failed
        orders are part of a successful demo: the returned result is always
        ``ok`` and counts both outcomes.
        """
        orders = OrderService(self._plugins)
        selected = [SCENARIOS[n] for n in (names or list(SCENARIOS))]
        results: list[dict[str, object]] = []
        completed = 0
        for index, scenario in enumerate(selected):
            if index and separator and echo is not None:
                echo(separator)
            result = orders.process(scenario.build(echo=echo))
            if on_result is not None:
                on_result(scenario, result)
            completed += result.ok
            results.append({"scenario": scenario.name, **result.model_dump(mode="json")})

        return ServiceResult(
            ok=True,
            op="demo",
            data={
                "completed": completed,
                "failed": len(selected) - completed,
                "orders": results,
            },
        )
