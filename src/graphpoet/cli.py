"""Root CLI group for graphpoet with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from graphpoet import __version__
from graphpoet.commands import register_commands
from graphpoet.commands._context import AppContext
from graphpoet.config.settings import PoetSettings
from graphpoet.domain.graph import GRAPH_KINDS


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="graphpoet")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the payload.")
@click.option("-v", "--verbose", is_flag=True, help="Show bridge scores, meta and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-b",
    "--backend",
    type=click.Choice(sorted(GRAPH_KINDS)),
    default=None,
    help="Graph representation (overrides [graph] backend).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read settings from this TOML file instead of graphpoet.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    backend: str | None,
    config_path: str | None,
) -> None:
    """graphpoet — bridge-word poems from word affinity graphs."""
    overrides: dict[str, Any] = {}
    if backend is not None:
        overrides["graph"] = {"backend": backend}
    ctx.obj = AppContext(
        PoetSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            **overrides,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
