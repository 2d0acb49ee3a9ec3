"""Typer main application for the twitchhelix CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from twitchhelix import __version__
from twitchhelix.cli.commands import follows, streams, users
from twitchhelix.core import setup_logging

console = Console()

app = typer.Typer(
    name="twitchhelix",
    help="Rate-limited Twitch Helix API client",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(streams.app, name="streams", help="Live stream commands")
app.add_typer(users.app, name="users", help="User lookup commands")
app.add_typer(follows.app, name="follows", help="Follow relationship commands")


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        console.print(f"[bold blue]twitchhelix[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """
    twitchhelix - query streams, users and follows from Twitch Helix.

    Credentials are read from TWITCH_CLIENT_ID and TWITCH_AUTH_TOKEN.
    """
    setup_logging()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
