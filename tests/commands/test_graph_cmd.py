"""Tests for the ``graphpoet graph`` command group."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from graphpoet.cli import cli
from tests.conftest import write_corpus


class TestEdges:
    def test_table(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        corpus = write_corpus(tmp_path, "a b a b")
        result = cli_runner.invoke(cli, ["graph", "edges", str(corpus)])
        assert result.exit_code == 0, result.output
        assert "Source" in result.output

    def test_quiet_lines(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        corpus = write_corpus(tmp_path, "a b a b")
        result = cli_runner.invoke(cli, ["-q", "graph", "edges", str(corpus)])
        assert result.output == "a b 2\nb a 1\n"

    def test_top(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        corpus = write_corpus(tmp_path, "a b a b")
        result = cli_runner.invoke(cli, ["--json", "graph", "edges", str(corpus), "--top", "1"])
        data = json.loads(result.output)
        assert data["data"]["count"] == 1

    def test_invalid_top(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        corpus = write_corpus(tmp_path, "a b")
        result = cli_runner.invoke(cli, ["graph", "edges", str(corpus), "--top", "0"])
        assert result.exit_code == 1
        assert "INVALID_ARGUMENT" in result.output


class TestBridgeCommand:
    def test_found(self, cli_runner: CliRunner, mugar_corpus: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "graph", "bridge", str(mugar_corpus), "Test", "the"])
        assert result.exit_code == 0
        assert result.output == "of\n"

    def test_json(self, cli_runner: CliRunner, mugar_corpus: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "graph", "bridge", str(mugar_corpus), "the", "system."]
        )
        data = json.loads(result.output)
        assert data["data"]["bridge"] is None


def test_group_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["graph", "--examples"])
    assert result.exit_code == 0
    assert "graphpoet graph edges" in result.output
