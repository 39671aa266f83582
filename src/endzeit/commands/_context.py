"""AppContext — per-invocation state for the endzeit command.

Configures logging from the settings and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from endzeit.config.logging import configure_logging
from endzeit.output.console import create_console
from endzeit.output.formatters import format_result
from endzeit.output.renderers import ProgressRenderer

if TYPE_CHECKING:
    from endzeit.config.settings import EndzeitSettings
    from endzeit.services.result import ServiceResult


class AppContext:
    """Shared context for one CLI invocation."""

    def __init__(self, settings: EndzeitSettings) -> None:
        self.settings = settings

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Enable telemetry context var when verbose
        if settings.verbose:
            from endzeit.services.telemetry import enable_telemetry

            enable_telemetry()

    def progress_renderer(self) -> ProgressRenderer | None:
        """Renderer drawing on stdout, or None in quiet mode."""
        if self.settings.quiet:
            return None
        console = create_console(file=sys.stdout)
        return ProgressRenderer(console, self.settings.display)

    def emit(self, result: ServiceResult) -> None:
        """Output a ServiceResult whose failure ends the run.

        * Success: printed to stdout in verbose mode only.
        * Failure: written to stderr, exits with code 1.
        """
        verbose = self.settings.verbose
        if result.ok:
            if verbose:
                click.echo(format_result(result, verbose=True))
            return
        click.echo(format_result(result, verbose=verbose), err=True)
        raise SystemExit(1)

    def report(self, result: ServiceResult) -> None:
        """Output a ServiceResult whose failure is tolerated.

        Failures become a ``WARNING:`` line on stderr and the exit status
        is left alone.
        """
        verbose = self.settings.verbose
        if result.ok:
            if verbose:
                click.echo(format_result(result, verbose=True))
            return
        message = result.error.message if result.error else "Unknown error"
        click.echo(f"WARNING: {result.op} — {message}", err=True)
        if verbose:
            click.echo(format_result(result, verbose=True), err=True)
