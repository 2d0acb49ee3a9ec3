"""Command line interface for twitchhelix."""
