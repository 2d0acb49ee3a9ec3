"""CLI commands module for twitchhelix."""

from twitchhelix.cli.commands import follows, streams, users

__all__ = ["follows", "streams", "users"]
