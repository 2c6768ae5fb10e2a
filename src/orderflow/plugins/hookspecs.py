"""Pluggy hook specifications for orderflow.

One lifecycle event fires after every processing run, and one setup-time
hook lets plugins contribute extra delivery or payment strategies.
"""

from __future__ import annotations

import pluggy

PROJECT_NAME = "orderflow"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class OrderflowHookSpec:
    """Hook specifications for the orderflow plugin system."""

    @hookspec
    def post_process_order(
        self,
        order_id: str,
        ok: bool,
        state: str,
        error_code: str | None,
    ) -> None:
        """Called after an order processing run, successful or not."""

    @hookspec
    def register_strategies(self) -> dict[str, dict[str, type]] | None:
        """Return ``{"delivery": {name: cls}, "payment": {name: cls}}`` additions."""
