"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy plugin loading and centralized result
output (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from orderflow.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from orderflow.config.settings import OrderflowSettings
    from orderflow.plugins.manager import PluginManager
    from orderflow.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are loaded on first use so ``--help`` and ``--version`` never
    trigger entry-point discovery.
    """

    def __init__(self, settings: OrderflowSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._plugins_checked = False

        from orderflow.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            currency=self.settings.display.currency,
        )

    @property
    def plugins(self) -> PluginManager | None:
        """The plugin manager, or None when plugins are disabled."""
        if not self._plugins_checked:
            self._plugins_checked = True
            if self.settings.plugins.enabled:
                from orderflow.plugins.manager import PluginManager

                self._plugins = PluginManager()
                names = self._plugins.discover_and_load()
                logger.debug("Loaded plugins: %s", names)
        return self._plugins

    def echo_result(self, result: ServiceResult) -> None:
        """Write a result to stdout without affecting the exit status.

        Used for order outcomes: a failed order is reported, not fatal.
        Warnings go to stderr so they don't pollute piped output.
        """
        settings = self.output
        click.echo(format_result(result, settings=settings))
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        if result.ok:
            self.echo_result(result)
        else:
            click.echo(format_result(result, settings=self.output), err=True)
            raise SystemExit(1)
