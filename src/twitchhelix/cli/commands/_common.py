"""Helpers shared by the CLI commands."""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

import typer
from rich.console import Console

from twitchhelix.core import HelixError, get_settings
from twitchhelix.helix import HelixClient

T = TypeVar("T")

console = Console()


def create_client() -> HelixClient:
    """Build a client from settings, exiting if credentials are missing."""
    settings = get_settings()
    if not settings.twitch_client_id or not settings.twitch_auth_token:
        console.print(
            "[red]Error: TWITCH_CLIENT_ID and TWITCH_AUTH_TOKEN must be set[/red]"
        )
        raise typer.Exit(1)
    return HelixClient.from_settings()


def run_request(coro: Awaitable[T]) -> T:
    """Run a client coroutine, turning API errors into a clean exit."""

    async def _runner() -> T:
        return await coro

    try:
        return asyncio.run(_runner())
    except HelixError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e
