"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from graphpoet.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from graphpoet.services.result import ServiceResult

    type Renderer = Callable[..., None]


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
    """Render only the payload for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "poem":
        return str(result.data.get("poem", ""))
    if result.op == "bridge":
        return result.data.get("bridge") or ""
    if result.op == "affinities":
        return "\n".join(
            f"{item['source']} {item['target']} {item['weight']}"
            for item in result.data.get("items", [])
        )
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="poet.ok"), Text(f"  {result.op}", style="poet.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="poet.key"), Text(str(value)), sep="")


def _bridge_positions(data: dict[str, Any]) -> set[int]:
    """Word positions in ``data["poem"]`` that hold inserted bridges."""
    return {b["index"] for b in data.get("bridges", [])}


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="poet.error"),
        Text(f"  {result.op}{code}", style="poet.op"),
        Text(f": {msg}"),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_poem(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print the poem with inserted bridge words highlighted."""
    _status_line(console, result)
    inserted = _bridge_positions(result.data)
    text = Text("  ")
    for i, word in enumerate(str(result.data.get("poem", "")).split(" ")):
        if i:
            text.append(" ")
        text.append(word, style="poet.bridge" if i in inserted else "poet.word")
    console.print(text)
    if verbose:
        for b in result.data.get("bridges", []):
            _field(console, b["after"], f"+{b['word']} (score {b['score']})")
        _render_meta(console, result)


def _render_bridge(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    word = data.get("bridge")
    path = f"{data['first']} -> {word} -> {data['second']}" if word else "no two-hop path"
    _field(console, "path", path)
    if word:
        _field(console, "score", data.get("score", 0))
    if verbose:
        _render_meta(console, result)


def _render_affinities(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the heaviest affinities as a table."""
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        _field(console, "count", 0)
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Source", style="poet.word")
    table.add_column("Target", style="poet.word")
    table.add_column("Weight", style="poet.weight", justify="right")
    for item in items:
        table.add_row(item["source"], item["target"], str(item["weight"]))
    console.print(table)
    _field(console, "vertices", result.data.get("vertices", 0))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Renderer] = {
    "poem": _render_poem,
    "bridge": _render_bridge,
    "affinities": _render_affinities,
}
