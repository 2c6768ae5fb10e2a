"""Strategy registry: strategy name -> class, per kind.

Built-in strategies are registered at import time. Plugins may add new
names through the ``register_strategies`` hook; built-in names are reserved.
"""

from __future__ import annotations

from enum import StrEnum

from orderflow.strategies.delivery import CourierDelivery, DeliveryStrategy, PostDelivery
from orderflow.strategies.payment import (
    CashPayment,
    CreditCardPayment,
    PaymentStrategy,
    PayPalPayment,
)


class StrategyKind(StrEnum):
    """The two strategy slots of an order."""

    DELIVERY = "delivery"
    PAYMENT = "payment"


_BASES: dict[str, type] = {
    StrategyKind.DELIVERY: DeliveryStrategy,
    StrategyKind.PAYMENT: PaymentStrategy,
}

# Populated by _register_builtins() at module load time.
STRATEGY_REGISTRY: dict[str, dict[str, type]] = {
    StrategyKind.DELIVERY: {},
    StrategyKind.PAYMENT: {},
}


def _builtin_strategy_map() -> dict[str, dict[str, type]]:
    """Return the built-in strategy classes keyed by kind and name."""
    return {
        StrategyKind.DELIVERY: {
            CourierDelivery.name: CourierDelivery,
            PostDelivery.name: PostDelivery,
        },
        StrategyKind.PAYMENT: {
            CreditCardPayment.name: CreditCardPayment,
            PayPalPayment.name: PayPalPayment,
            CashPayment.name: CashPayment,
        },
    }


def get_strategy(kind: str, name: str) -> type:
    """Look up the strategy class registered as *name* for *kind*.

    Raises:
        KeyError: If *kind* is unknown or nothing is registered under *name*.
    """
    if kind not in STRATEGY_REGISTRY:
        msg = f"Unknown strategy kind {kind!r}"
        raise KeyError(msg)
    try:
        return STRATEGY_REGISTRY[kind][name]
    except KeyError:
        msg = f"No {kind} strategy registered as {name!r}"
        raise KeyError(msg) from None


def create_delivery(name: str) -> DeliveryStrategy:
    """Instantiate the delivery strategy registered as *name*."""
    strategy: DeliveryStrategy = get_strategy(StrategyKind.DELIVERY, name)()
    return strategy


def create_payment(name: str) -> PaymentStrategy:
    """Instantiate the payment strategy registered as *name*."""
    strategy: PaymentStrategy = get_strategy(StrategyKind.PAYMENT, name)()
    return strategy


def list_strategies() -> dict[str, list[dict[str, str]]]:
    """Describe every registered strategy, grouped by kind."""
    return {
        kind: [
            {"name": name, "label": getattr(cls, "label", ""), "class": cls.__name__}
            for name, cls in sorted(entries.items())
        ]
        for kind, entries in STRATEGY_REGISTRY.items()
    }


def register_strategy(kind: str, name: str, strategy_cls: type) -> None:
    """Register a custom strategy class under *name*.

    The class must extend the base class for *kind*. Built-in names are
    reserved and cannot be overridden.
    """
    if kind not in _BASES:
        msg = f"Unknown strategy kind {kind!r}"
        raise ValueError(msg)

    normalized_name = name.strip()
    if not normalized_name:
        msg = "Strategy name must not be empty"
        raise ValueError(msg)

    base = _BASES[kind]
    if not isinstance(strategy_cls, type) or not issubclass(strategy_cls, base):
        msg = f"Strategy {normalized_name!r} must extend {base.__name__}"
        raise TypeError(msg)

    if normalized_name in _builtin_strategy_map()[kind]:
        msg = f"Strategy {normalized_name!r} conflicts with a built-in {kind} strategy"
        raise ValueError(msg)

    existing = STRATEGY_REGISTRY[kind].get(normalized_name)
    if existing is not None and existing is not strategy_cls:
        msg = f"{kind.capitalize()} strategy {normalized_name!r} is already registered"
        raise ValueError(msg)

    STRATEGY_REGISTRY[kind][normalized_name] = strategy_cls


def _register_builtins() -> None:
    """Populate :data:`STRATEGY_REGISTRY` with built-in strategies."""
    for kind, entries in _builtin_strategy_map().items():
        STRATEGY_REGISTRY[kind].update(entries)


_register_builtins()
