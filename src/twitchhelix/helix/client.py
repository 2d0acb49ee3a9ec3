"""Twitch Helix client with an integrated quota gate."""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from twitchhelix.core import (
    AuthenticationError,
    DecodeError,
    LogContext,
    RateLimitError,
    RequestError,
    TransportError,
    get_logger,
    get_settings,
)
from twitchhelix.core.config import DEFAULT_BASE_URL
from twitchhelix.helix.endpoints import HelixRequest, RequestBuilder, build_helix_url
from twitchhelix.helix.models import (
    FollowListResponse,
    StreamListResponse,
    UserListResponse,
)
from twitchhelix.helix.rate_limiter import RateLimiter


logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


@dataclass
class ClientConfig:
    """Configuration for the Helix client."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0


@dataclass
class HelixClient:
    """Helix API client.

    Every call reserves quota on the shared ``rate_limiter`` before it goes
    out, so one instance can be used from many concurrent tasks.
    """

    client_id: str
    auth_token: str
    rate_limiter: RateLimiter = field(default_factory=RateLimiter)
    config: ClientConfig = field(default_factory=ClientConfig)
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    @classmethod
    def from_settings(cls) -> "HelixClient":
        """Create client from application settings."""
        settings = get_settings()
        return cls(
            client_id=settings.twitch_client_id,
            auth_token=settings.twitch_auth_token,
            rate_limiter=RateLimiter(
                max_points=settings.ratelimit_points_max,
                window_length=settings.ratelimit_window_seconds,
                poll_interval=settings.ratelimit_poll_interval,
            ),
            config=ClientConfig(
                base_url=settings.helix_base_url,
                timeout=settings.request_timeout,
            ),
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            **DEFAULT_HEADERS,
            "Client-ID": self.client_id,
            "Authorization": f"Bearer {self.auth_token}",
        }

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get a short-lived httpx client carrying the credentials."""
        client = httpx.AsyncClient(
            headers=self.headers,
            timeout=httpx.Timeout(self.config.timeout),
            transport=self.transport,
        )
        try:
            yield client
        finally:
            await client.aclose()

    def _parse_rate_limit_headers(self, response: httpx.Response) -> None:
        """Feed the server's remaining quota back into the local gate."""
        remaining = response.headers.get("ratelimit-remaining")
        limit = response.headers.get("ratelimit-limit")
        if remaining and remaining.isdigit():
            self.rate_limiter.observe_remaining(
                int(remaining),
                limit=int(limit) if limit and limit.isdigit() else None,
            )

    @staticmethod
    def _retry_after(response: httpx.Response) -> float | None:
        """Seconds until the server bucket refills, from Ratelimit-Reset."""
        reset = response.headers.get("ratelimit-reset")
        if not reset:
            return None
        try:
            return max(0.0, float(reset) - time.time())
        except ValueError:
            return None

    def _handle_error_response(self, response: httpx.Response, endpoint: str) -> None:
        """Log a non-success response and raise the matching error."""
        status = response.status_code
        body = response.text

        logger.warning(
            "Error on Helix fetch",
            extra={"status": status, "body": body[:500], "endpoint": endpoint},
        )

        if status == 429:
            raise RateLimitError(
                f"Rate limited on {endpoint}",
                endpoint=endpoint,
                retry_after=self._retry_after(response),
            )

        if status in (401, 403):
            raise AuthenticationError(
                f"Helix rejected credentials ({status})",
                endpoint=endpoint,
                status_code=status,
            )

        raise RequestError(
            f"Helix returned status {status}",
            endpoint=endpoint,
            status_code=status,
            body=body,
        )

    async def _request(self, request: HelixRequest) -> str:
        """Reserve quota, perform the GET and return the raw body.

        Raises:
            RateLimitError: On a 429 response.
            AuthenticationError: On a 401 or 403 response.
            RequestError: On any other non-200 response.
            TransportError: If the HTTP exchange fails.
        """
        endpoint = request.endpoint

        with LogContext(endpoint=endpoint):
            await self.rate_limiter.reserve(request.cost)

            url = build_helix_url(self.config.base_url, request)
            start_time = time.time()

            # Header values must be ASCII; httpx rejects others while building the client
            try:
                async with self._get_client() as client:
                    response = await client.get(url)
            except (httpx.HTTPError, UnicodeEncodeError) as e:
                logger.error("HTTP error during request", extra={"error": str(e)})
                raise TransportError(
                    f"Request to {endpoint} failed: {e}", endpoint=endpoint
                ) from e

            if response.status_code != 200:
                self._handle_error_response(response, endpoint)

            self._parse_rate_limit_headers(response)

            logger.debug(
                "Helix request completed",
                extra={"response_time_ms": (time.time() - start_time) * 1000},
            )
            return response.text

    async def _fetch(self, request: HelixRequest, model: type[ModelT]) -> ModelT:
        """Perform a request and decode the body into ``model``."""
        body = await self._request(request)
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(
                f"Invalid {model.__name__} payload from {request.endpoint}: "
                f"{e.error_count()} error(s)",
                endpoint=request.endpoint,
            ) from e

    async def get_streams(self, *user_logins: str) -> StreamListResponse:
        """Get live streams for the given broadcasters.

        Args:
            user_logins: Broadcaster login names. Offline channels are absent
                from the result.

        Returns:
            StreamListResponse with one entry per live channel.
        """
        request = RequestBuilder.build_streams(user_logins)
        return await self._fetch(request, StreamListResponse)

    async def get_users(self, *user_logins: str) -> UserListResponse:
        """Get user profiles by login name."""
        request = RequestBuilder.build_users(user_logins)
        return await self._fetch(request, UserListResponse)

    async def get_followers_from(self, user_id: str) -> FollowListResponse:
        """Get the channels a user follows.

        Args:
            user_id: Id of the following user.
        """
        request = RequestBuilder.build_follows(from_id=user_id)
        return await self._fetch(request, FollowListResponse)

    async def get_followers_to(self, user_id: str) -> FollowListResponse:
        """Get the users following a channel.

        Args:
            user_id: Id of the followed user.
        """
        request = RequestBuilder.build_follows(to_id=user_id)
        return await self._fetch(request, FollowListResponse)

    async def get_follow_relationship(
        self, from_id: str, to_id: str
    ) -> FollowListResponse:
        """Check whether ``from_id`` follows ``to_id``.

        Returns:
            FollowListResponse holding the single edge, or no data if
            there is no such follow.
        """
        request = RequestBuilder.build_follows(from_id=from_id, to_id=to_id)
        return await self._fetch(request, FollowListResponse)
