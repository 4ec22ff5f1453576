"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from roverctl.output.console import create_console, get_output, status_style

if TYPE_CHECKING:
    from rich.console import Console

    from roverctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    State-producing ops print only the rover rendering, e.g.
    ``(2, 2) EAST``; binding listings print ``token=operation`` lines.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "display" in result.data:
        return str(result.data["display"])

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(f"{item['token']}={item['operation']}" for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="rover.ok")
    op = Text(f"  {result.op}", style="rover.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rover.key")
    console.print(k, Text(str(value), style=style), sep="")


def _state_line(console: Console, data: dict[str, Any]) -> None:
    """Print the rover rendering, colored by whether it stopped."""
    _field(console, "rover", data.get("display", ""), status_style(bool(data.get("stopped"))))


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="rover.warning"), Text(warning), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rover.error")
    op = Text(f"  {result.op}", style="rover.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_run(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Final state, then one table row per batch."""
    _status_line(console, result)
    _state_line(console, result.data)

    batches = result.data.get("batches", [])
    if verbose:
        landing = result.data.get("landing", {})
        _field(
            console,
            "landed",
            f"({landing.get('x')}, {landing.get('y')}) {landing.get('direction')}",
            "rover.position",
        )
    if batches and (verbose or len(batches) > 1):
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("commands", style="rover.token")
        table.add_column("result")
        for index, batch in enumerate(batches, start=1):
            table.add_row(
                str(index),
                Text(batch.get("commands", "")),
                Text(batch.get("display", ""), style=status_style(bool(batch.get("stopped")))),
            )
        console.print()
        console.print(table)
    _render_warnings(console, result)


def _render_execute(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "commands", result.data.get("commands", ""), "rover.token")
    _state_line(console, result.data)
    _render_warnings(console, result)


def _render_bindings(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("token", style="rover.token")
    table.add_column("operation")
    for item in items:
        table.add_row(Text(item["token"]), Text(item["operation"]))
    console.print(table)
    if verbose:
        _field(console, "sensors", result.data.get("sensors", 0))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "run": _render_run,
    "execute": _render_execute,
    "list_bindings": _render_bindings,
}
