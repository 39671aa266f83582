"""Root CLI command for endzeit."""

from __future__ import annotations

import click

from endzeit import __version__
from endzeit.commands._base import EndzeitCommand
from endzeit.commands._context import AppContext
from endzeit.config.settings import EndzeitSettings
from endzeit.domain.models import CountdownRequest


@click.command(
    "endzeit",
    cls=EndzeitCommand,
    examples="""\
  endzeit --time 17:30
  endzeit --date 2030-01-01
  endzeit --date 24.12.2030 --time 18:00:00
  endzeit --date 06/2031
  endzeit --seconds 300 --command 'notify-send "Tea is ready"'
  endzeit --date 2030 --time 00:00 --quiet --command ./release.sh""",
)
@click.version_option(version=__version__, prog_name="endzeit")
@click.option(
    "--date",
    "date_text",
    default=None,
    help="Target date: YYYY-MM-DD, DD.MM.YYYY, MM/YYYY or YYYY. Defaults to today.",
)
@click.option(
    "--time",
    "time_text",
    default=None,
    help="Target time: HH:MM or HH:MM:SS (24-hour). Defaults to midnight.",
)
@click.option(
    "--seconds",
    type=int,
    default=None,
    help="Seconds added after date and time are resolved.",
)
@click.option("--command", default=None, help="Shell command to run when the target is reached.")
@click.option("-q", "--quiet", is_flag=True, help="No progress output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    date_text: str | None,
    time_text: str | None,
    seconds: int | None,
    command: str | None,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """endzeit — count down to a date and time, then run a command.

    With --seconds but no --time, the offset counts from the current
    time of day. A failing --command is reported but never changes the
    exit status.
    """
    request = CountdownRequest(date=date_text, time=time_text, seconds=seconds, command=command)
    if not request.has_target and request.command is None:
        click.echo(ctx.get_help())
        return

    settings = EndzeitSettings.from_cli(
        config_path=config_path,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)

    from endzeit.services.command import CommandService
    from endzeit.services.countdown import CountdownService

    app.emit(CountdownService(settings).run(request, app.progress_renderer()))
    app.report(CommandService(settings).execute(request.command))
