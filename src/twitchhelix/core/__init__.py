"""Core module - configuration, logging, exceptions."""

from twitchhelix.core.config import Settings, get_settings
from twitchhelix.core.exceptions import (
    HelixError,
    RateLimitError,
    AuthenticationError,
    RequestError,
    TransportError,
    DecodeError,
)
from twitchhelix.core.logging import LogContext, setup_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "HelixError",
    "RateLimitError",
    "AuthenticationError",
    "RequestError",
    "TransportError",
    "DecodeError",
    "LogContext",
    "setup_logging",
    "get_logger",
]
