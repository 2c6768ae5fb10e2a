"""Command: run the example orders."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orderflow.commands._base import OrderflowCommand
from orderflow.services.demo import SCENARIOS

if TYPE_CHECKING:
    from orderflow.commands._context import AppContext
    from orderflow.services.demo import Scenario
    from orderflow.services.result import ServiceResult


@click.command(
    cls=OrderflowCommand,
    examples="""\
  orderflow demo
  orderflow demo --scenario courier-card
  orderflow --json demo
  orderflow -v demo""",
)
@click.option(
    "--scenario",
    "scenarios",
    multiple=True,
    type=click.Choice(list(SCENARIOS)),
    help="Run only this scenario (repeatable). Default: all.",
)
@click.pass_obj
def demo(app: AppContext, scenarios: tuple[str, ...]) -> None:
    """Process the example orders and report each outcome.

    Failed orders are reported but never change the exit status.
    """
    from orderflow.services.demo import DemoService

    output = app.output

    def report(_scenario: Scenario, result: ServiceResult) -> None:
        if not output.json_output:
            app.echo_result(result)

    summary = DemoService(app.plugins).run(
        list(scenarios) or None,
        echo=click.echo if output.streams_messages else None,
        on_result=report,
        separator=app.settings.display.separator,
    )
    if output.json_output or output.verbose:
        app.emit(summary)
