"""Rich Console factory and theme for graphpoet output.

Consoles render into a StringIO buffer so formatters keep a
``ServiceResult -> str`` contract.  Outside a terminal (pipes, CliRunner)
Rich emits plain text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

POET_THEME = Theme(
    {
        "poet.ok": "bold green",
        "poet.error": "bold red",
        "poet.op": "bold cyan",
        "poet.key": "dim",
        "poet.word": "bold",
        "poet.bridge": "italic magenta",
        "poet.weight": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for stable test output).
    """
    return Console(
        file=StringIO(),
        theme=POET_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
