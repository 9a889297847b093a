"""Tests for the root graphpoet CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from graphpoet import __version__
from graphpoet.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "graphpoet" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-graphpoet.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", ["poem", "graph"])
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0


@pytest.mark.parametrize("backend", ["adjacency", "edge-list"])
def test_backend_flag_selects_graph(
    cli_runner: CliRunner, mugar_corpus: Path, backend: str
) -> None:
    result = cli_runner.invoke(
        cli, ["--json", "-b", backend, "poem", str(mugar_corpus), "Test the system."]
    )
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["meta"]["backend"] == backend
    assert data["data"]["poem"] == "Test of the system."


def test_backend_flag_overrides_toml(
    cli_runner: CliRunner, tmp_path: Path, mugar_corpus: Path
) -> None:
    (tmp_path / "graphpoet.toml").write_text('[graph]\nbackend = "edge-list"\n')
    result = cli_runner.invoke(
        cli, ["--json", "--backend", "adjacency", "graph", "edges", str(mugar_corpus)]
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["meta"]["backend"] == "adjacency"


def test_unknown_backend_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-b", "matrix", "poem", "corpus.txt", "hi"])
    assert result.exit_code == 2
    assert "matrix" in result.output
