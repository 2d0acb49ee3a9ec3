"""Twitch Helix client infrastructure."""

from twitchhelix.helix.client import ClientConfig, HelixClient
from twitchhelix.helix.endpoints import (
    EndpointType,
    HelixRequest,
    RequestBuilder,
    build_helix_url,
)
from twitchhelix.helix.models import (
    BroadcasterType,
    Follow,
    FollowListResponse,
    Pagination,
    Stream,
    StreamListResponse,
    User,
    UserListResponse,
)
from twitchhelix.helix.rate_limiter import RateLimiter

__all__ = [
    # Client
    "HelixClient",
    "ClientConfig",
    # Models
    "Stream",
    "StreamListResponse",
    "User",
    "UserListResponse",
    "BroadcasterType",
    "Follow",
    "FollowListResponse",
    "Pagination",
    # Endpoints
    "EndpointType",
    "HelixRequest",
    "RequestBuilder",
    "build_helix_url",
    # Rate Limiter
    "RateLimiter",
]
