"""Shared pytest fixtures and test helpers for orderflow tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from orderflow.domain.order import Order
from orderflow.domain.products import Product
from orderflow.strategies.delivery import CourierDelivery, DeliveryStrategy
from orderflow.strategies.payment import CashPayment, PaymentStrategy
from orderflow.strategies.registry import STRATEGY_REGISTRY, _builtin_strategy_map


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def products() -> list[Product]:
    """The two-product catalog used throughout the examples."""
    return [
        Product(name="Laptop", price=25000),
        Product(name="Headphones", price=3000),
    ]


def make_order(
    products: list[Product] | None,
    delivery: DeliveryStrategy | None = None,
    payment: PaymentStrategy | None = None,
    **fields: str | None,
) -> Order:
    """Build an order, defaulting to courier delivery and cash payment."""
    return Order(
        products,
        delivery or CourierDelivery(),
        payment or CashPayment(),
        **fields,
    )


@pytest.fixture(autouse=True)
def _restore_strategy_registry() -> Generator[None]:
    """Drop strategies registered by a test (plugins, custom classes)."""
    yield
    builtins = _builtin_strategy_map()
    for kind, entries in STRATEGY_REGISTRY.items():
        for name in list(entries):
            if name not in builtins[kind]:
                del entries[name]


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no orderflow.toml or env config leaks in.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.delenv("ORDERFLOW_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
