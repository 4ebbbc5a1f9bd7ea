"""CLI package for checksymlinks.

This package contains the Typer application.
"""

from checksymlinks.cli.main import app

__all__ = ["app"]
