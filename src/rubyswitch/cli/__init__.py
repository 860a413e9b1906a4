"""Typer application for the ``rubyswitch`` command."""

from __future__ import annotations

import logging

import typer

from rubyswitch.cli.commands import current, doctor, env, hook, list_rubies, reset
from rubyswitch.cli.helpers import configure_logging

app = typer.Typer(
    name="rubyswitch",
    help="Switch Ruby versions from .ruby-version files",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        from rubyswitch import __version__

        typer.echo(f"rubyswitch {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show errors"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Configure logging for every subcommand."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    configure_logging(level)


app.command()(env)
app.command()(reset)
app.command()(hook)
app.command(name="list")(list_rubies)
app.command()(current)
app.command()(doctor)

__all__ = ["app"]
