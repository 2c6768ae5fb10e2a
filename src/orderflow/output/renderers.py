"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from orderflow.output.console import create_console, get_output, style_for_state

if TYPE_CHECKING:
    from rich.console import Console

    from orderflow.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    currency: str = "",
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, currency=currency)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "of.ok"), (f"  {result.op}", "of.op")))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    if not style and (key == "id" or key.endswith("_id")):
        style = "of.id"
    console.print(Text.assemble((f"  {key}: ", "of.key"), (str(value), style)))


def _money(value: Any, currency: str) -> str:
    return f"{value} {currency}".rstrip()


def _product_table(products: list[dict[str, Any]], currency: str) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Product")
    table.add_column("Price", style="of.money", justify="right")
    for item in products:
        table.add_row(str(item.get("name", "")), _money(item.get("price", ""), currency))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "of.error"), (f"  {result.op}", "of.op"), f" - {msg}")
    )

    if "id" in result.data:
        _field(console, "id", result.data["id"])
    if err:
        _field(console, "code", err.code)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Order renderers ───────────────────────────────────────────────────


def _render_order(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    currency: str = "",
) -> None:
    """Render a completed process_order result."""
    d = result.data
    _status_line(console, result)
    _field(console, "id", d.get("id", ""))
    _field(console, "delivery", d.get("delivery", ""))
    _field(console, "payment", d.get("payment", ""))
    _field(console, "total", _money(d.get("total", ""), currency), style="of.money")
    state = str(d.get("state", ""))
    _field(console, "state", state, style=style_for_state(state))

    if verbose and d.get("products"):
        console.print()
        console.print(_product_table(d["products"], currency))


def _render_strategies(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    currency: str = "",
) -> None:
    """Render the registered strategies, one table per kind."""
    _status_line(console, result)
    for kind, entries in result.data.items():
        console.print()
        table = Table(
            title=Text(kind, style=f"of.kind.{kind}"),
            show_header=True,
            pad_edge=False,
            expand=False,
        )
        table.add_column("Name", no_wrap=True)
        table.add_column("Description")
        if verbose:
            table.add_column("Class", style="dim")
        for entry in entries:
            row = [entry.get("name", ""), entry.get("label", "")]
            if verbose:
                row.append(entry.get("class", ""))
            table.add_row(*row)
        console.print(table)


def _render_demo(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    currency: str = "",
) -> None:
    """Render the demo summary; per-order results are printed as they run."""
    d = result.data
    _status_line(console, result)
    _field(console, "completed", d.get("completed", 0), style="of.state.completed")
    _field(console, "failed", d.get("failed", 0), style="of.state.failed")

    if verbose and d.get("orders"):
        console.print()
        table = Table(show_header=True, pad_edge=False, expand=False)
        table.add_column("Scenario")
        table.add_column("ID", style="of.id", no_wrap=True)
        table.add_column("State")
        for item in d["orders"]:
            data = item.get("data", {})
            state = str(data.get("state", ""))
            table.add_row(
                str(item.get("scenario", "")),
                str(data.get("id", "")),
                Text(state, style=style_for_state(state)),
            )
        console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    currency: str = "",
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(Text(f"    {k}: {v}"))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "process_order": _render_order,
    "list_strategies": _render_strategies,
    "demo": _render_demo,
}
