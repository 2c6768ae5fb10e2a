"""Order processing lifecycle.

A processing run walks the happy path one step at a time:

    created -> products_checked -> payment_validated -> delivery_validated
            -> payment_processed -> delivery_processed -> completed

Any validation failure moves the run to ``failed``. Both ``completed`` and
``failed`` are terminal for the run; a new run starts again from ``created``.
"""

from __future__ import annotations

from enum import StrEnum


class OrderState(StrEnum):
    """State of an order within one processing run."""

    CREATED = "created"
    PRODUCTS_CHECKED = "products_checked"
    PAYMENT_VALIDATED = "payment_validated"
    DELIVERY_VALIDATED = "delivery_validated"
    PAYMENT_PROCESSED = "payment_processed"
    DELIVERY_PROCESSED = "delivery_processed"
    COMPLETED = "completed"
    FAILED = "failed"


ORDER_TRANSITIONS: dict[str, list[str]] = {
    "created": ["products_checked", "failed"],
    "products_checked": ["payment_validated", "failed"],
    "payment_validated": ["delivery_validated", "failed"],
    "delivery_validated": ["payment_processed"],
    "payment_processed": ["delivery_processed"],
    "delivery_processed": ["completed"],
    "completed": [],
    "failed": [],
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = ORDER_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed
