"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Owns logging setup and result emission
(stdout/stderr routing plus exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphpoet.config.logging import configure_logging
from graphpoet.output.formatters import OutputSettings, format_result
from graphpoet.services.poem import PoemService

if TYPE_CHECKING:
    from graphpoet.config.settings import PoetSettings
    from graphpoet.services.result import ServiceResult


class AppContext:
    """State shared through Click's command hierarchy."""

    def __init__(self, settings: PoetSettings) -> None:
        self.settings = settings
        self._poems: PoemService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def poems(self) -> PoemService:
        """The poem service (created lazily on first access)."""
        if self._poems is None:
            self._poems = PoemService(self.settings)
        return self._poems

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult with the right stream and exit code.

        * Success: stdout; warnings go to stderr unless in JSON mode,
          where they are already part of the payload.
        * Failure: stderr, then exit with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
