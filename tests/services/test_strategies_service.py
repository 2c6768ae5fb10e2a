"""Tests for StrategyService."""

from orderflow.services.strategies import StrategyService


def test_list_strategies() -> None:
    result = StrategyService().list_strategies()
    assert result.ok is True
    assert result.op == "list_strategies"
    assert {e["name"] for e in result.data["delivery"]} == {"courier", "post"}
    assert {e["name"] for e in result.data["payment"]} == {"credit-card", "paypal", "cash"}
