"""Stream lookup commands for twitchhelix."""

from __future__ import annotations

import typer
from rich.table import Table

from twitchhelix.cli.commands._common import console, create_client, run_request

app = typer.Typer(
    name="streams",
    help="Live stream commands",
    no_args_is_help=True,
)


@app.command("live")
def live(
    logins: list[str] = typer.Argument(..., help="Broadcaster login names"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response as JSON"),
) -> None:
    """
    Show which of the given channels are live.

    Example:
        twitchhelix streams live shroud pokimane
    """
    client = create_client()
    response = run_request(client.get_streams(*logins))

    if as_json:
        console.print_json(response.model_dump_json())
        return

    live_by_login = response.by_login()

    table = Table(title="Streams")
    table.add_column("Channel", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Game", style="magenta")
    table.add_column("Viewers", justify="right", style="yellow")
    table.add_column("Title", style="green")

    for login in logins:
        stream = live_by_login.get(login.lower())
        if stream is None:
            table.add_row(login, "[dim]offline[/dim]", "", "", "")
            continue
        table.add_row(
            stream.user_name or stream.user_login,
            "[red]LIVE[/red]",
            stream.game_name,
            f"{stream.viewer_count:,}",
            stream.title,
        )

    console.print(table)
    console.print(f"\n[green]{len(response.data)} of {len(logins)} channel(s) live[/green]")
