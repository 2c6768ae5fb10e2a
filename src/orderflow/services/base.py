"""BaseService: shared foundation for orderflow services.

Every service may receive a :class:`PluginManager`. Lifecycle events are
dispatched synchronously in the caller's thread.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from orderflow.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class OrderService(BaseService):
            def process(self, order: Order) -> ServiceResult:
                ...
                self._dispatch_event("post_process_order", payload, warnings)
    """

    def __init__(self, plugins: PluginManager | None = None) -> None:
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call *hook_name* on every plugin. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        hook = getattr(self._plugins.hook, hook_name, None)
        if hook is None:
            warnings.append(f"Unknown hook {hook_name}")
            return
        try:
            hook(**payload)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
