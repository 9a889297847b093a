"""Shared pytest fixtures and test helpers for graphpoet tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from graphpoet.config.settings import PoetSettings

MUGAR = "This is a test of the Mugar Omni Theater sound system."


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from a clean temp CWD with no GRAPHPOET_* env vars.

    Also restores root logger handlers, since the CLI reconfigures logging
    on every invocation.
    """
    for key in list(os.environ):
        if key.startswith("GRAPHPOET_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    pkg_level = logging.getLogger("graphpoet").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("graphpoet").setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> PoetSettings:
    """Default settings (no TOML file present)."""
    return PoetSettings.from_cli(start=tmp_path)


@pytest.fixture
def mugar_corpus(tmp_path: Path) -> Path:
    """The one-line Mugar Omni Theater corpus."""
    return write_corpus(tmp_path, MUGAR, name="mugar-omni-theater.txt")


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_corpus(directory: Path, text: str, *, name: str = "corpus.txt") -> Path:
    """Write *text* to a corpus file under *directory* and return its path."""
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path
