"""Utility modules for checksymlinks.

This module exports commonly used utility functions.
"""

from checksymlinks.utils.formatting import (
    configure_logging,
    err_console,
    format_elapsed,
    print_error,
)

__all__ = [
    "configure_logging",
    "err_console",
    "format_elapsed",
    "print_error",
]
