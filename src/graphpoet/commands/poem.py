"""Command: rewrite text with bridge words from a corpus."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphpoet.commands._base import PoetCommand

if TYPE_CHECKING:
    from graphpoet.commands._context import AppContext


@click.command(
    cls=PoetCommand,
    examples="""\
  graphpoet poem corpus.txt "Test the system."
  graphpoet --json poem corpus.txt "Hello, world."
  graphpoet -q poem corpus.txt "Seek to explore"     # poem text only
  echo "Test the system." | graphpoet poem corpus.txt""",
)
@click.argument("corpus", type=click.Path(path_type=Path, dir_okay=False))
@click.argument("text", required=False)
@click.pass_obj
def poem(app: AppContext, corpus: Path, text: str | None) -> None:
    """Insert bridge words from CORPUS between adjacent words of TEXT.

    TEXT is read from stdin when omitted.
    """
    if text is None:
        text = click.get_text_stream("stdin").read()
    app.emit(app.poems.poem(corpus, text))
