"""Helix endpoint definitions and request builders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable
from urllib.parse import urlencode


class EndpointType(str, Enum):
    """Helix endpoint paths."""

    STREAMS = "streams"
    USERS = "users"
    USERS_FOLLOWS = "users/follows"


# Quota points charged per request; Helix currently bills every GET at 1
ENDPOINT_COSTS: dict[EndpointType, int] = {
    EndpointType.STREAMS: 1,
    EndpointType.USERS: 1,
    EndpointType.USERS_FOLLOWS: 1,
}


@dataclass(frozen=True)
class HelixRequest:
    """A single GET against a Helix endpoint."""

    endpoint_type: EndpointType
    params: tuple[tuple[str, str], ...] = ()
    cost: int = 1

    @property
    def path(self) -> str:
        return self.endpoint_type.value

    @property
    def query(self) -> str:
        """Percent-encoded query string, repeated keys kept in order."""
        return urlencode(self.params)

    @property
    def endpoint(self) -> str:
        """Path plus query, relative to the Helix base URL."""
        if not self.params:
            return self.path
        return f"{self.path}?{self.query}"


class RequestBuilder:
    """Builds Helix requests from typed arguments."""

    @staticmethod
    def _build(
        endpoint_type: EndpointType, params: Iterable[tuple[str, str]]
    ) -> HelixRequest:
        return HelixRequest(
            endpoint_type=endpoint_type,
            params=tuple((key, str(value)) for key, value in params),
            cost=ENDPOINT_COSTS[endpoint_type],
        )

    @classmethod
    def build_streams(cls, user_logins: Iterable[str]) -> HelixRequest:
        """Build a Get Streams request, one user_login per login."""
        return cls._build(
            EndpointType.STREAMS, (("user_login", login) for login in user_logins)
        )

    @classmethod
    def build_users(cls, user_logins: Iterable[str]) -> HelixRequest:
        """Build a Get Users request, one login per login."""
        return cls._build(EndpointType.USERS, (("login", login) for login in user_logins))

    @classmethod
    def build_follows(
        cls,
        from_id: str | None = None,
        to_id: str | None = None,
    ) -> HelixRequest:
        """Build a Get Users Follows request.

        Args:
            from_id: Id of the following user.
            to_id: Id of the followed user.

        Raises:
            ValueError: If neither id is given.
        """
        if from_id is None and to_id is None:
            raise ValueError("At least one of from_id or to_id is required")

        params: list[tuple[str, str]] = []
        if from_id is not None:
            params.append(("from_id", from_id))
        if to_id is not None:
            params.append(("to_id", to_id))
        return cls._build(EndpointType.USERS_FOLLOWS, params)


def build_helix_url(base_url: str, request: HelixRequest) -> str:
    """Build the full Helix URL for a request."""
    return f"{base_url}{request.endpoint}"
