import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from twitchhelix.helix.models import (
    BroadcasterType,
    FollowListResponse,
    StreamListResponse,
    UserListResponse,
)


STREAMS_PAYLOAD = {
    "data": [
        {
            "id": "41375541868",
            "user_id": "459331509",
            "user_login": "auronplay",
            "user_name": "auronplay",
            "game_id": "494131",
            "game_name": "Little Nightmares",
            "type": "live",
            "title": "hablamos y le damos a Little Nightmares 1",
            "viewer_count": 78365,
            "started_at": "2021-03-10T15:04:21Z",
            "language": "es",
            "thumbnail_url": "https://static-cdn.jtvnw.net/previews-ttv/live_user_auronplay-{width}x{height}.jpg",
            "tag_ids": None,
            "tags": ["Español"],
            "is_mature": False,
        }
    ],
    "pagination": {"cursor": "eyJiIjp7IkN1cnNvciI6ImV5SnpJam8zT0RNMk5TNDBORFF4TlRjMU1UY3hOU3dpWkNJNlptRnNjMlVzSW5RaU9uUnlkV1Y5In0sImEiOnsiQ3Vyc29yIjoiIn19"},
}

USERS_PAYLOAD = {
    "data": [
        {
            "id": "141981764",
            "login": "twitchdev",
            "display_name": "TwitchDev",
            "type": "",
            "broadcaster_type": "partner",
            "description": "Supporting third-party developers building Twitch integrations",
            "profile_image_url": "https://static-cdn.jtvnw.net/jtv_user_pictures/profile.png",
            "offline_image_url": "https://static-cdn.jtvnw.net/jtv_user_pictures/offline.png",
            "view_count": 5980557,
            "email": "not-real@email.com",
            "created_at": "2016-12-14T20:32:28Z",
        }
    ]
}

FOLLOWS_PAYLOAD = {
    "total": 12345,
    "data": [
        {
            "from_id": "171003792",
            "from_login": "iiisutha067iii",
            "from_name": "IIIsutha067III",
            "to_id": "23161357",
            "to_login": "lirik",
            "to_name": "LIRIK",
            "followed_at": "2017-08-22T22:55:24Z",
        }
    ],
    "pagination": {"cursor": "eyJiIjpudWxsLCJhIjoiMTUwMzQ0MTc3NjQyNDQyMjAwMCJ9"},
}


class TestStreamListResponse:
    def test_decodes_wire_fields(self):
        response = StreamListResponse.model_validate_json(json.dumps(STREAMS_PAYLOAD))

        assert len(response.data) == 1
        stream = response.data[0]
        assert stream.user_login == "auronplay"
        assert stream.game_name == "Little Nightmares"
        assert stream.viewer_count == 78365
        assert stream.started_at == datetime(2021, 3, 10, 15, 4, 21, tzinfo=timezone.utc)
        assert stream.tag_ids == []
        assert stream.tags == ["Español"]
        assert stream.is_mature is False
        assert response.pagination.cursor is not None

    def test_thumbnail_size(self):
        response = StreamListResponse.model_validate(STREAMS_PAYLOAD)
        url = response.data[0].thumbnail(320, 180)
        assert url.endswith("live_user_auronplay-320x180.jpg")

    def test_by_login_is_case_insensitive(self):
        response = StreamListResponse.model_validate(STREAMS_PAYLOAD)
        assert set(response.by_login()) == {"auronplay"}

    def test_empty_object_yields_defaults(self):
        response = StreamListResponse.model_validate_json("{}")
        assert response.data == []
        assert response.pagination.cursor is None

    def test_unknown_fields_are_ignored(self):
        payload = {"data": [{"id": "1", "brand_new_field": 42}], "pagination": {}}
        response = StreamListResponse.model_validate(payload)
        assert response.data[0].id == "1"

    def test_empty_body_is_invalid(self):
        with pytest.raises(ValidationError):
            StreamListResponse.model_validate_json("")


class TestUserListResponse:
    def test_decodes_wire_fields(self):
        response = UserListResponse.model_validate(USERS_PAYLOAD)
        user = response.data[0]
        assert user.id == "141981764"
        assert user.display_name == "TwitchDev"
        assert user.broadcaster_type is BroadcasterType.PARTNER
        assert user.view_count == 5980557
        assert user.created_at.year == 2016

    def test_blank_broadcaster_type(self):
        payload = {"data": [{"id": "1", "login": "nobody", "broadcaster_type": ""}]}
        response = UserListResponse.model_validate(payload)
        assert response.data[0].broadcaster_type is BroadcasterType.NONE
        assert response.data[0].email is None

    def test_unknown_broadcaster_type_decodes_as_none(self):
        payload = {"data": [{"id": "1", "login": "newbie", "broadcaster_type": "ambassador"}]}
        response = UserListResponse.model_validate_json(json.dumps(payload))
        assert response.data[0].broadcaster_type is BroadcasterType.NONE
        assert response.data[0].login == "newbie"

    def test_by_login(self):
        response = UserListResponse.model_validate(USERS_PAYLOAD)
        assert response.by_login()["twitchdev"].id == "141981764"


class TestFollowListResponse:
    def test_decodes_wire_fields(self):
        response = FollowListResponse.model_validate(FOLLOWS_PAYLOAD)
        assert response.total == 12345
        follow = response.data[0]
        assert follow.from_id == "171003792"
        assert follow.to_login == "lirik"
        assert follow.followed_at == datetime(2017, 8, 22, 22, 55, 24, tzinfo=timezone.utc)
        assert response.is_following is True

    def test_no_relationship(self):
        response = FollowListResponse.model_validate({"total": 0, "data": [], "pagination": {}})
        assert response.is_following is False

    def test_models_are_frozen(self):
        response = FollowListResponse.model_validate(FOLLOWS_PAYLOAD)
        with pytest.raises(ValidationError):
            response.total = 1
