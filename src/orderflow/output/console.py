"""Rich Console factory and theme for orderflow output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ORDERFLOW_THEME = Theme(
    {
        "of.ok": "bold green",
        "of.error": "bold red",
        "of.warning": "bold yellow",
        "of.op": "bold cyan",
        "of.key": "dim",
        "of.id": "bold blue",
        "of.money": "magenta",
        "of.state.completed": "green",
        "of.state.failed": "red",
        "of.kind.delivery": "blue",
        "of.kind.payment": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ORDERFLOW_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_state(state: str) -> str:
    """Return the Rich style name for an order state ("" for in-flight states)."""
    if state in ("completed", "failed"):
        return f"of.state.{state}"
    return ""
