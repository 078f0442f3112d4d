"""Operation-specific Rich renderers for ServiceResult.

A successful naming result renders as the bare name so that
``zillion name 42 | tee`` stays pipeable; ``--verbose`` adds the status
line, the remaining fields and the telemetry span tree.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall back to the naming renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from zillion.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from zillion.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_name)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the name, or a one-line error."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    name = result.data.get("name")
    if name is not None:
        return str(name)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="zillion.ok")
    op = Text(f"  {result.op}", style="zillion.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="zillion.key")
    if key == "name":
        v = Text(str(value), style="zillion.name")
    elif key in ("input", "exponent"):
        v = Text(str(value), style="zillion.input")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"

    line = Text(prefix)
    line.append(f"{duration:>9.3f}ms", style=style)
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_span(console, child, indent=indent + 2)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="zillion.error")
    op = Text(f"  {result.op}", style="zillion.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Naming renderers ──────────────────────────────────────────────────


def _render_name(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render full_name / power_of_ten results."""
    d = result.data
    if not verbose:
        console.print(Text(str(d.get("name", "")), style="zillion.name"))
        return

    _status_line(console, result)
    for key in ("input", "exponent", "name", "scheme", "scale", "groups"):
        if key in d:
            _field(console, key, d[key])
    _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "full_name": _render_name,
    "power_of_ten": _render_name,
}
