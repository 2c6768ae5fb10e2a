"""Subcommand modules for orderflow.

Provides register_commands() which uses deferred imports to keep
``orderflow --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from orderflow.commands.demo import demo
    from orderflow.commands.strategies import strategies

    cli.add_command(demo)
    cli.add_command(strategies)
