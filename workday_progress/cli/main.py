from __future__ import annotations

import typer

from .. import __version__
from ..core.config import get_settings
from ..core.errors import WorkdayProgressError
from ..core.holidays import load_holidays
from ..core.logging_config import get_logger, setup_logging
from ..core.report import build_report, format_report
from . import output as cli_output

app = typer.Typer(help="Business days elapsed and remaining in the current month")

logger = get_logger(__name__)


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
) -> None:
    """Print business-day progress for the current month.

    Weekends and the bundled holiday list are excluded. Run without a
    subcommand to print the report.
    """
    setup_logging(json_output=json_logs, log_level=log_level)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": log_level})
    if ctx.invoked_subcommand is None:
        report()


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


def report() -> None:
    settings = get_settings()
    try:
        holidays = load_holidays(settings.holidays_resource)
        result = build_report(holidays, settings=settings)
    except WorkdayProgressError as e:
        logger.exception("Report failed", extra={"error_type": type(e).__name__})
        cli_output.error(f"Failed to compute business days: {e}")
        raise typer.Exit(code=1) from e

    if result.days_total == 0:
        cli_output.warning("This month has no business days")

    for line in format_report(result):
        cli_output.plain(line)
