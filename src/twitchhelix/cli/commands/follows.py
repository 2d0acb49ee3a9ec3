"""Follow relationship commands for twitchhelix."""

from __future__ import annotations

import typer
from rich.table import Table

from twitchhelix.cli.commands._common import console, create_client, run_request
from twitchhelix.helix import FollowListResponse

app = typer.Typer(
    name="follows",
    help="Follow relationship commands",
    no_args_is_help=True,
)


def _print_follows(response: FollowListResponse, title: str) -> None:
    table = Table(title=title)
    table.add_column("From", style="cyan")
    table.add_column("To", style="green")
    table.add_column("Followed At", justify="right")

    for follow in response.data:
        table.add_row(
            f"{follow.from_name or follow.from_login} ({follow.from_id})",
            f"{follow.to_name or follow.to_login} ({follow.to_id})",
            follow.followed_at.isoformat() if follow.followed_at else "",
        )

    console.print(table)
    console.print(f"\n[green]Total: {response.total:,}[/green]")


@app.command("from")
def follows_from(
    user_id: str = typer.Argument(..., help="Id of the following user"),
) -> None:
    """
    List the channels a user follows.

    Example:
        twitchhelix follows from 12345
    """
    client = create_client()
    response = run_request(client.get_followers_from(user_id))
    _print_follows(response, f"Followed by {user_id}")


@app.command("to")
def follows_to(
    user_id: str = typer.Argument(..., help="Id of the followed user"),
) -> None:
    """
    List the users following a channel.

    Example:
        twitchhelix follows to 12345
    """
    client = create_client()
    response = run_request(client.get_followers_to(user_id))
    _print_follows(response, f"Followers of {user_id}")


@app.command("check")
def check(
    from_id: str = typer.Argument(..., help="Id of the following user"),
    to_id: str = typer.Argument(..., help="Id of the followed user"),
) -> None:
    """
    Check whether one user follows another.

    Example:
        twitchhelix follows check 12345 67890
    """
    client = create_client()
    response = run_request(client.get_follow_relationship(from_id, to_id))

    if response.is_following:
        follow = response.data[0] if response.data else None
        since = f" since {follow.followed_at:%Y-%m-%d}" if follow and follow.followed_at else ""
        console.print(f"[green]{from_id} follows {to_id}{since}[/green]")
    else:
        console.print(f"[yellow]{from_id} does not follow {to_id}[/yellow]")
        raise typer.Exit(1)
