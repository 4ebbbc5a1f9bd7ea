"""Rich console formatting utilities.

Provides consistent formatting for CLI output and log records using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from checksymlinks.core.theme import get_theme

PACKAGE_LOGGER = "checksymlinks"


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Shared console instance for log records and errors (theme loaded once at import)
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def configure_logging(quiet: bool = False) -> logging.Logger:
    """Route package log records to the stderr console.

    Replaces any handler installed by a previous call, so repeated runs
    in one process do not duplicate output.

    Args:
        quiet: If True, hide DEBUG notes (visited entries, valid links).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if quiet else logging.DEBUG)
    return logger


def format_elapsed(seconds: float) -> str:
    """Format a duration as a short human-readable string.

    Args:
        seconds: Duration in seconds.

    Returns:
        String like "850us", "12.3ms", "1.52s" or "2m03s".
    """
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.0f}us"
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, rest = divmod(int(seconds), 60)
    return f"{minutes}m{rest:02d}s"


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)
