"""Console output helpers for the CLI.

Logging Strategy:
- Use console output functions (error, warning, plain) for user-facing messages
- Use structured logging (logger.info, logger.error, etc.) for diagnostics
- The report goes to stdout; errors, warnings and logs go to stderr
"""

from __future__ import annotations

import typer


def error(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Display an error message in red with cross emoji.

    Args:
        message: The error message to display
        prefix: Whether to include the cross emoji prefix (default: True)
        err: Whether to write to stderr instead of stdout (default: True)

    Example:
        error("Holiday configuration is empty")
        # Output: ❌ Holiday configuration is empty
    """
    formatted = f"❌ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.RED, err=err)


def warning(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Display a warning message in yellow with warning emoji."""
    formatted = f"⚠️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.YELLOW, err=err)


def plain(message: str) -> None:
    """Display a report line on stdout, uncolored."""
    typer.echo(message)
