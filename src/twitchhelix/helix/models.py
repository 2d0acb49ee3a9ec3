"""Helix response models using Pydantic.

Helix sends snake_case keys, which map one to one onto attribute names.
Unknown keys are ignored so new upstream fields do not break decoding.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HelixModel(BaseModel):
    """Base for all Helix payloads."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class BroadcasterType(str, Enum):
    """Helix broadcaster types."""

    NONE = ""
    AFFILIATE = "affiliate"
    PARTNER = "partner"


class Pagination(HelixModel):
    """Cursor block returned by list endpoints."""

    cursor: str | None = None


class Stream(HelixModel):
    """A live stream."""

    id: str = Field(..., description="Stream ID")
    user_id: str = Field(default="", description="Broadcaster user ID")
    user_login: str = Field(default="", description="Broadcaster login name")
    user_name: str = Field(default="", description="Broadcaster display name")
    game_id: str = Field(default="")
    game_name: str = Field(default="")
    type: str = Field(default="live", description="'live' or '' on error")
    title: str = Field(default="")
    viewer_count: int = Field(default=0, ge=0)
    started_at: datetime | None = Field(default=None)
    language: str = Field(default="")
    thumbnail_url: str = Field(default="")
    tag_ids: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    is_mature: bool = Field(default=False)

    @field_validator("tag_ids", "tags", mode="before")
    @classmethod
    def null_to_empty(cls, v: object) -> object:
        """Helix sends null instead of an empty list for untagged streams."""
        return [] if v is None else v

    def thumbnail(self, width: int, height: int) -> str:
        """Thumbnail URL with the size placeholders filled in."""
        return self.thumbnail_url.replace("{width}", str(width)).replace(
            "{height}", str(height)
        )


class User(HelixModel):
    """A Twitch user."""

    id: str = Field(..., description="User ID")
    login: str = Field(default="", description="Login name")
    display_name: str = Field(default="")
    type: str = Field(default="", description="'admin', 'global_mod', 'staff' or ''")
    broadcaster_type: BroadcasterType = Field(default=BroadcasterType.NONE)
    description: str = Field(default="")
    profile_image_url: str = Field(default="")
    offline_image_url: str = Field(default="")
    view_count: int = Field(default=0, ge=0)
    email: str | None = Field(default=None, description="Only with user:read:email scope")
    created_at: datetime | None = Field(default=None)

    @field_validator("broadcaster_type", mode="before")
    @classmethod
    def unknown_broadcaster_type(cls, v: object) -> object:
        """Values Helix adds later decode as NONE."""
        if isinstance(v, str) and v not in {t.value for t in BroadcasterType}:
            return BroadcasterType.NONE
        return v


class Follow(HelixModel):
    """A directed follow edge between two users."""

    from_id: str
    from_login: str = ""
    from_name: str = ""
    to_id: str
    to_login: str = ""
    to_name: str = ""
    followed_at: datetime | None = None


class StreamListResponse(HelixModel):
    """Get Streams response."""

    data: list[Stream] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    def by_login(self) -> dict[str, Stream]:
        """Live streams keyed by lowercase broadcaster login."""
        return {stream.user_login.lower(): stream for stream in self.data}


class UserListResponse(HelixModel):
    """Get Users response."""

    data: list[User] = Field(default_factory=list)

    def by_login(self) -> dict[str, User]:
        """Users keyed by lowercase login."""
        return {user.login.lower(): user for user in self.data}


class FollowListResponse(HelixModel):
    """Get Users Follows response."""

    total: int = Field(default=0, ge=0)
    data: list[Follow] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @property
    def is_following(self) -> bool:
        """True when the response contains at least one follow edge."""
        return self.total > 0 or bool(self.data)
