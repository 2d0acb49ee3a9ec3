"""twitchhelix - rate-limited Twitch Helix API client."""

from twitchhelix.helix import (
    FollowListResponse,
    HelixClient,
    RateLimiter,
    StreamListResponse,
    UserListResponse,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "HelixClient",
    "RateLimiter",
    "StreamListResponse",
    "UserListResponse",
    "FollowListResponse",
]
