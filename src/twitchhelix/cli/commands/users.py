"""User lookup commands for twitchhelix."""

from __future__ import annotations

import typer
from rich.table import Table

from twitchhelix.cli.commands._common import console, create_client, run_request

app = typer.Typer(
    name="users",
    help="User lookup commands",
    no_args_is_help=True,
)


@app.command("lookup")
def lookup(
    logins: list[str] = typer.Argument(..., help="Login names to resolve"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response as JSON"),
) -> None:
    """
    Resolve login names to user profiles.

    Example:
        twitchhelix users lookup shroud
    """
    client = create_client()
    response = run_request(client.get_users(*logins))

    if as_json:
        console.print_json(response.model_dump_json())
        return

    table = Table(title="Users")
    table.add_column("ID", style="dim")
    table.add_column("Login", style="cyan")
    table.add_column("Display Name", style="green")
    table.add_column("Type", style="magenta")
    table.add_column("Created", justify="right")

    for user in response.data:
        table.add_row(
            user.id,
            user.login,
            user.display_name,
            user.broadcaster_type.value or "-",
            user.created_at.date().isoformat() if user.created_at else "",
        )

    console.print(table)

    missing = set(login.lower() for login in logins) - set(response.by_login())
    if missing:
        console.print(f"[yellow]Not found: {', '.join(sorted(missing))}[/yellow]")
