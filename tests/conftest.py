"""
Shared fixtures for the twitchhelix test suite.
"""

import pytest
import structlog

from twitchhelix.core.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_global_state(monkeypatch):
    """Keep cached settings and logging config from leaking between tests."""
    for name in ("TWITCH_CLIENT_ID", "TWITCH_AUTH_TOKEN", "HELIX_BASE_URL", "LOG_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class FakeClock:
    """Manually advanced monotonic clock with a matching async sleep."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()
