"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from latercap.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from latercap.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    data = result.data
    if result.op == "extract_items":
        return "\n".join(data.get("items", []))
    if result.op == "extract_due":
        return data.get("due_date") or ""
    if result.op == "confidence":
        return f"{data.get('confidence', 0.0):.2f}"
    if result.op == "detect":
        return str(data.get("type", ""))
    if result.op == "capture":
        return str(data.get("content_type", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="later.ok")
    op = Text(f"  {result.op}", style="later.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="later.key")
    if key in ("type", "content_type", "suggested_type", "detected"):
        v = Text(str(value), style=style_for_type(str(value)))
    elif key == "title":
        v = Text(str(value), style="later.title")
    elif key == "due_date":
        v = Text(str(value) if value else "-", style="later.date")
    elif key == "confidence" and isinstance(value, (int, float)):
        v = Text(f"{value:.2f}", style="later.score")
    else:
        v = Text(str(value))
    console.print(k + v)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 10:
        style = "bold red"
    elif duration > 1:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"

    extras: list[str] = []
    for ak, av in span_data.get("annotations", {}).items():
        extras.append(f"{ak}={av}")
    if extras:
        line += f"  ({', '.join(extras)})"

    console.print(line, markup=True)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _score_table(scores: dict[str, float], highlight: str | None = None) -> Table:
    """Build a Rich Table of per-type confidences."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Type")
    table.add_column("Confidence", style="later.score", justify="right")
    for content_type, score in scores.items():
        marker = " *" if content_type == highlight else ""
        table.add_row(
            Text(f"{content_type}{marker}", style=style_for_type(content_type)),
            f"{float(score):.2f}",
        )
    return table


def _render_items(console: Console, items: list[str]) -> None:
    for index, item in enumerate(items, start=1):
        console.print(Text(f"  {index:>3}. ") + Text(item))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="later.error")
    op = Text(f"  {result.op}", style="later.op")
    sep = Text(": ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Classification renderers ──────────────────────────────────────────


def _render_detect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "type", d.get("type", ""))
    _field(console, "confidence", d.get("confidence", 0.0))
    if d.get("scores"):
        console.print()
        console.print(_score_table(d["scores"], highlight=d.get("type")))
    if verbose:
        _render_meta(console, result)


def _render_confidence(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    for key in ("type", "confidence", "detected"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_extract_items(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    _field(console, "count", len(items))
    if items:
        _render_items(console, items)
    if verbose:
        _render_meta(console, result)


def _render_extract_due(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _field(console, "due_date", result.data.get("due_date"))
    if verbose:
        _render_meta(console, result)


def _render_capture(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("title", "content_type", "suggested_type", "source", "confidence"):
        if key in d:
            _field(console, key, d[key])
    if d.get("due_date"):
        _field(console, "due_date", d["due_date"])
    if d.get("needs_confirmation"):
        console.print(Text("  needs confirmation", style="later.warning"))
    items = d.get("items") or []
    if items:
        _field(console, "items", len(items))
        _render_items(console, items)
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "detect": _render_detect,
    "confidence": _render_confidence,
    "extract_items": _render_extract_items,
    "extract_due": _render_extract_due,
    "capture": _render_capture,
}
