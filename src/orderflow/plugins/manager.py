"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) in the ``orderflow.plugins`` group.
Capabilities: lifecycle hooks and extra strategies.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from orderflow.plugins.hookspecs import PROJECT_NAME, OrderflowHookSpec

ENTRY_POINT_GROUP = "orderflow.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(OrderflowHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and merge their strategies.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        for plugin in self._pm.get_plugins():
            self._register_plugin_strategies(plugin, self._plugin_name(plugin))
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly and merge its strategies."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        self._register_plugin_strategies(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._plugin_name(p) for p in self._pm.get_plugins()]

    def _plugin_name(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _register_plugin_strategies(plugin: object, plugin_name: str) -> None:
        """Merge the strategies exposed by a single plugin into the registry."""
        from orderflow.strategies.registry import register_strategy

        hook = getattr(plugin, "register_strategies", None)
        if hook is None:
            return

        try:
            strategy_map = hook()
        except Exception:
            logger.warning(
                "Failed to collect strategies from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return

        if strategy_map is None:
            return
        if not isinstance(strategy_map, dict):
            logger.warning("Plugin %s returned non-dict strategy registrations", plugin_name)
            return

        for kind, entries in strategy_map.items():
            if entries is None:
                continue
            if not isinstance(entries, dict):
                logger.warning(
                    "Plugin %s returned non-dict %s strategy registrations",
                    plugin_name,
                    kind,
                )
                continue
            for name, strategy_cls in entries.items():
                try:
                    register_strategy(kind, name, strategy_cls)
                except (TypeError, ValueError):
                    logger.warning(
                        "Skipping %s strategy %r from plugin %s",
                        kind,
                        name,
                        plugin_name,
                        exc_info=True,
                    )
