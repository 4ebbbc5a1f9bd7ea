"""Main CLI application entry point.

Defines the Typer application with its single command.
"""

from typing import Annotated, NoReturn

import typer

from checksymlinks import __version__
from checksymlinks.core.config import ConfigError, build_config
from checksymlinks.utils.formatting import configure_logging, print_error
from checksymlinks.walker.traverser import LinkChecker, WalkError

PROJECT_URL = "https://github.com/erwiese/checksymlinks"

EPILOG = (
    "[bold]Examples:[/bold]\n\n"
    "Report broken links: [green]checksymlinks /home/user/xyz/dir1[/green]\n\n"
    "Delete broken links: [green]checksymlinks --delete-broken /home/user/xyz/dir1[/green]\n\n"
    f"checksymlinks v{__version__} {PROJECT_URL}"
)

app = typer.Typer(
    name="checksymlinks",
    help="Traverse a directory recursively and search for broken links.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"checksymlinks version {__version__}")
        raise typer.Exit()


def _usage_error(ctx: typer.Context, message: str) -> NoReturn:
    """Print a usage error to stderr and exit with code 1."""
    print_error(message)
    typer.echo(ctx.get_usage(), err=True)
    typer.echo(f"Try '{ctx.command_path} -h' for help.", err=True)
    raise typer.Exit(code=1)


@app.command(epilog=EPILOG)
def main(
    ctx: typer.Context,
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="DIRECTORY",
            help="Root directory to check.",
            show_default=False,
        ),
    ] = None,
    delete_broken: Annotated[
        bool,
        typer.Option(
            "--delete-broken",
            help="Remove all broken symbolic links. Use with care!",
        ),
    ] = False,
    delete_all: Annotated[
        bool,
        typer.Option(
            "--delete-all",
            help="Remove all symbolic links. Use with care!",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-error messages.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Traverse a directory recursively and search for broken links.

    Every symbolic link below DIRECTORY is inspected. Links whose target
    cannot be resolved are reported as broken and, with --delete-broken,
    removed. With --delete-all every link is removed.
    """
    if not paths:
        _usage_error(ctx, "No root path given")
    if len(paths) > 1:
        _usage_error(ctx, f"unknown arguments: {' '.join(paths)}")

    try:
        config = build_config(
            paths[0],
            delete_broken=delete_broken,
            delete_all=delete_all,
            quiet=quiet,
        )
    except ConfigError as e:
        _usage_error(ctx, str(e))

    configure_logging(quiet=config.quiet)

    try:
        LinkChecker(config).run()
    except WalkError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
