"""Tests for PluginManager: registration, hook relay, and strategy merging."""

from __future__ import annotations

import logging

import pytest

from orderflow.domain.order import Order
from orderflow.plugins import hookimpl
from orderflow.plugins.manager import PluginManager
from orderflow.strategies.payment import PaymentStrategy
from orderflow.strategies.registry import STRATEGY_REGISTRY, create_payment


class _DummyPlugin:
    @hookimpl
    def post_process_order(
        self, order_id: str, ok: bool, state: str, error_code: str | None
    ) -> None:
        pass


class _VoucherPayment(PaymentStrategy):
    name = "voucher"
    label = "Gift voucher"

    def validate_payment(self, order: Order) -> bool:
        return True

    def process_payment(self, order: Order) -> None:
        order.emit("Voucher redeemed")


class _StrategyPlugin:
    @hookimpl
    def register_strategies(self) -> dict[str, dict[str, type]]:
        return {"payment": {"voucher": _VoucherPayment}}


class _ConflictingStrategyPlugin:
    @hookimpl
    def register_strategies(self) -> dict[str, dict[str, type]]:
        return {"payment": {"cash": _VoucherPayment}}


class _BadReturnPlugin:
    @hookimpl
    def register_strategies(self) -> list[str]:
        return ["voucher"]


class _NonDictEntriesPlugin:
    @hookimpl
    def register_strategies(self) -> dict[str, object]:
        return {"delivery": ["drone"], "payment": {"voucher": _VoucherPayment}}


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "post_process_order")
        assert hasattr(pm.hook, "register_strategies")

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert "_DummyPlugin" in pm.list_plugin_names()

    def test_discover_without_entry_points(self) -> None:
        pm = PluginManager()
        names = pm.discover_and_load()
        assert isinstance(names, list)


class TestStrategyRegistration:
    def test_plugin_strategies_merged(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_StrategyPlugin())
        assert isinstance(create_payment("voucher"), _VoucherPayment)

    def test_builtin_conflict_skipped(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_ConflictingStrategyPlugin())
        assert STRATEGY_REGISTRY["payment"]["cash"] is not _VoucherPayment

    def test_non_dict_return_ignored(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_BadReturnPlugin())
        assert "voucher" not in STRATEGY_REGISTRY["payment"]

    def test_non_dict_entries_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        with caplog.at_level(logging.WARNING, logger="orderflow.plugins.manager"):
            pm.register_plugin(_NonDictEntriesPlugin(), name="mixed")
        assert "mixed" in pm.list_plugin_names()
        assert "drone" not in STRATEGY_REGISTRY["delivery"]
        assert isinstance(create_payment("voucher"), _VoucherPayment)
        assert "non-dict delivery strategy registrations" in caplog.text
