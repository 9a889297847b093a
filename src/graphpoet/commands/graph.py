"""Command group: inspect a corpus affinity graph."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graphpoet.commands._base import PoetGroup

if TYPE_CHECKING:
    from graphpoet.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  graphpoet graph edges corpus.txt --top 10
  graphpoet graph bridge corpus.txt test the"""

_CORPUS = click.argument("corpus", type=click.Path(path_type=Path, dir_okay=False))


@click.group(cls=PoetGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Inspect the word affinity graph of a corpus."""


@graph.command(
    examples="""\
  graphpoet graph edges corpus.txt
  graphpoet graph edges corpus.txt --top 5
  graphpoet --json graph edges corpus.txt"""
)
@_CORPUS
@click.option("--top", default=None, type=int, help="Max results (default from config).")
@click.pass_obj
def edges(app: AppContext, corpus: Path, top: int | None) -> None:
    """List the heaviest word affinities."""
    app.emit(app.poems.affinities(corpus, top=top))


@graph.command(
    examples="""\
  graphpoet graph bridge corpus.txt test the
  graphpoet --json graph bridge corpus.txt Hello, world."""
)
@_CORPUS
@click.argument("first")
@click.argument("second")
@click.pass_obj
def bridge(app: AppContext, corpus: Path, first: str, second: str) -> None:
    """Find the best bridge word between FIRST and SECOND."""
    app.emit(app.poems.bridge(corpus, first, second))
