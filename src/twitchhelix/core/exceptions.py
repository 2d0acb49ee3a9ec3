"""Custom exceptions for twitchhelix."""

from __future__ import annotations

from typing import Any


class HelixError(Exception):
    """Base exception for all twitchhelix errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RateLimitError(HelixError):
    """Raised when the Helix quota rejects a request."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        endpoint: str | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(
            message,
            details={"endpoint": endpoint, "retry_after": retry_after},
        )
        self.endpoint = endpoint
        self.retry_after = retry_after


class AuthenticationError(HelixError):
    """Raised when Helix rejects the client id or bearer token."""

    def __init__(
        self,
        message: str = "Authentication failed",
        endpoint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            message,
            details={"endpoint": endpoint, "status_code": status_code},
        )
        self.endpoint = endpoint
        self.status_code = status_code


class RequestError(HelixError):
    """Raised when Helix answers with a non-success status."""

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(
            message,
            details={
                "endpoint": endpoint,
                "status_code": status_code,
                "body": body[:200],
            },
        )
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body


class TransportError(HelixError):
    """Raised when the HTTP exchange itself fails."""

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        super().__init__(message, details={"endpoint": endpoint})
        self.endpoint = endpoint


class DecodeError(HelixError):
    """Raised when a response body does not match the expected model."""

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        super().__init__(message, details={"endpoint": endpoint})
        self.endpoint = endpoint
