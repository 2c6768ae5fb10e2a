"""Command: list the available delivery and payment strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orderflow.commands._base import OrderflowCommand

if TYPE_CHECKING:
    from orderflow.commands._context import AppContext


@click.command(
    cls=OrderflowCommand,
    examples="""\
  orderflow strategies
  orderflow --json strategies""",
)
@click.pass_obj
def strategies(app: AppContext) -> None:
    """List registered delivery and payment strategies."""
    from orderflow.services.strategies import StrategyService

    app.emit(StrategyService(app.plugins).list_strategies())
