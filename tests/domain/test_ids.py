"""Tests for order ID generation."""

import uuid

from orderflow.domain.ids import generate_order_id


class TestGenerateOrderId:
    def test_format(self) -> None:
        order_id = generate_order_id()
        assert len(order_id) == 36
        assert order_id == order_id.lower()
        assert uuid.UUID(order_id).version == 4

    def test_unique(self) -> None:
        ids = {generate_order_id() for _ in range(1000)}
        assert len(ids) == 1000
