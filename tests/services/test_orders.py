"""Tests for OrderService."""

from __future__ import annotations

from typing import Any

import pluggy

from orderflow.domain.order import Order
from orderflow.domain.products import Product
from orderflow.plugins.manager import PluginManager
from orderflow.services.orders import OrderService
from orderflow.strategies.delivery import CourierDelivery, PostDelivery
from orderflow.strategies.payment import CreditCardPayment, PayPalPayment

hookimpl = pluggy.HookimplMarker("orderflow")


class _Recorder:
    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []

    @hookimpl
    def post_process_order(
        self, order_id: str, ok: bool, state: str, error_code: str | None
    ) -> None:
        self.events.append(
            {"order_id": order_id, "ok": ok, "state": state, "error_code": error_code}
        )


class _Broken:
    @hookimpl
    def post_process_order(
        self, order_id: str, ok: bool, state: str, error_code: str | None
    ) -> None:
        raise RuntimeError("boom")


def _scenario_a(products: list[Product]) -> Order:
    return Order(
        products,
        CourierDelivery(),
        CreditCardPayment(),
        delivery_address="10 Victory St.",
        credit_card_number="1234567890123456",
    )


def _scenario_b(products: list[Product]) -> Order:
    return Order(products, PostDelivery(), PayPalPayment(), paypal_email="user@example.com")


class TestProcess:
    def test_success(self, products: list[Product]) -> None:
        order = _scenario_a(products)
        result = OrderService().process(order)
        assert result.ok is True
        assert result.op == "process_order"
        assert result.error is None
        assert result.data["id"] == order.order_id
        assert result.data["state"] == "completed"
        assert result.data["delivery"] == "courier"
        assert result.data["payment"] == "credit-card"
        assert result.data["total"] == "28000"
        assert result.data["products"][0] == {"name": "Laptop", "price": "25000"}
        assert result.data["messages"][-1] == f"Order {order.order_id} processed successfully"

    def test_delivery_failure(self, products: list[Product]) -> None:
        result = OrderService().process(_scenario_b(products))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "DELIVERY_VALIDATION_FAILED"
        assert result.error.message == "Delivery validation failed"
        assert result.error.detail == {"state": "failed"}
        assert result.data["messages"] == ["Delivery validation failed"]

    def test_empty_order(self) -> None:
        order = Order([], CourierDelivery(), CreditCardPayment())
        result = OrderService().process(order)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "EMPTY_ORDER"
        assert result.data["products"] == []
        assert result.data["total"] == "0"


class TestPluginEvents:
    def test_post_process_order_fired(self, products: list[Product]) -> None:
        pm = PluginManager()
        recorder = _Recorder()
        pm.register_plugin(recorder)
        svc = OrderService(pm)

        ok_order = _scenario_a(products)
        svc.process(ok_order)
        svc.process(_scenario_b(products))

        assert recorder.events[0] == {
            "order_id": ok_order.order_id,
            "ok": True,
            "state": "completed",
            "error_code": None,
        }
        assert recorder.events[1]["ok"] is False
        assert recorder.events[1]["error_code"] == "DELIVERY_VALIDATION_FAILED"

    def test_plugin_failure_is_warning(self, products: list[Product]) -> None:
        pm = PluginManager()
        pm.register_plugin(_Broken())
        result = OrderService(pm).process(_scenario_a(products))
        assert result.ok is True
        assert result.warnings == ["Plugin hook post_process_order failed"]
