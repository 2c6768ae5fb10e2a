"""OrderService: runs an order through its pipeline and reports a ServiceResult."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from orderflow.services.base import BaseService
from orderflow.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from orderflow.domain.order import Order

logger = logging.getLogger(__name__)


class OrderService(BaseService):
    """Process orders and notify plugins of the outcome."""

    def process(self, order: Order) -> ServiceResult:
        """Run ``order.process_order()`` once.

        A failed order is a normal outcome, not an exception: the result has
        ``ok=False`` and an error carrying the failure code.
        """
        with structlog.contextvars.bound_contextvars(order_id=order.order_id):
            ok = order.process_order()
            warnings: list[str] = []
            self._dispatch_event(
                "post_process_order",
                {
                    "order_id": order.order_id,
                    "ok": ok,
                    "state": str(order.state),
                    "error_code": order.failure.code if order.failure else None,
                },
                warnings,
            )

            data = _order_payload(order)
            if ok:
                logger.info("Order completed")
                return ServiceResult(
                    ok=True, op="process_order", data=data, warnings=warnings
                )

            failure = order.failure
            code = failure.code if failure else "ORDER_FAILED"
            message = failure.message if failure else "Order processing failed"
            logger.info("Order failed: %s", code)
            return ServiceResult(
                ok=False,
                op="process_order",
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code=code, message=message, detail={"state": str(order.state)}
                ),
            )


def _order_payload(order: Order) -> dict[str, Any]:
    return {
        "id": order.order_id,
        "state": str(order.state),
        "delivery": order.delivery_strategy.name,
        "payment": order.payment_strategy.name,
        "products": [{"name": p.name, "price": str(p.price)} for p in order.products or ()],
        "total": str(order.total),
        "messages": list(order.messages),
    }
