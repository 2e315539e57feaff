"""
Model tests.

Payloads mirror real panel responses, including their mixed quoting.
Models must decode them and dump them back in the same shape classes.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from xtream_data.codecs import FlexibleBoolean, Shape
from xtream_data.models import (
    AuthenticationResponse,
    Category,
    EPGContainer,
    SeriesInfo,
    Stream,
    VideoOnDemandInfo,
)


# =========================================================================
# Authentication
# =========================================================================


class TestAuthenticationResponse:
    def test_decodes_mixed_shapes(self, auth_payload):
        response = AuthenticationResponse.model_validate(auth_payload)
        user = response.user_info
        server = response.server_info

        assert user.auth.value is True
        assert user.auth.shape is Shape.BARE
        assert user.is_trial.value is False
        assert user.is_trial.shape is Shape.QUOTED
        assert user.exp_date is None
        assert user.created_at.value == datetime(2020, 9, 13, 12, 26, 40, tzinfo=timezone.utc)
        assert user.max_connections == 2
        assert user.allowed_output_formats == ["m3u8", "ts"]

        assert server.port == 80
        assert server.timezone.name == "Europe/London"
        assert server.timestamp_now.epoch == 1700000000

    def test_dump_reproduces_wire_shapes(self, auth_payload):
        response = AuthenticationResponse.model_validate(auth_payload)
        dumped = response.model_dump(exclude_none=False)

        assert dumped["user_info"]["auth"] == 1
        assert dumped["user_info"]["is_trial"] == "0"
        assert dumped["user_info"]["created_at"] == "1600000000"
        assert dumped["user_info"]["exp_date"] is None
        assert dumped["user_info"]["max_connections"] == "2"
        assert dumped["server_info"]["timestamp_now"] == 1700000000
        assert dumped["server_info"]["timezone"] == "Europe/London"
        assert dumped["server_info"]["port"] == "80"

    def test_json_round_trip(self, auth_payload):
        body = json.dumps(auth_payload)
        response = AuthenticationResponse.model_validate_json(body)
        again = AuthenticationResponse.model_validate_json(response.model_dump_json())
        assert again == response
        assert json.loads(response.model_dump_json())["user_info"]["created_at"] == "1600000000"

    def test_expiring_account(self, auth_payload):
        auth_payload["user_info"]["exp_date"] = "1735689600"
        response = AuthenticationResponse.model_validate(auth_payload)
        assert response.user_info.exp_date.value.year == 2025
        assert response.model_dump()["user_info"]["exp_date"] == "1735689600"

    def test_bad_boolean_aborts_record(self, auth_payload):
        auth_payload["user_info"]["auth"] = "maybe"
        with pytest.raises(ValidationError, match="maybe"):
            AuthenticationResponse.model_validate(auth_payload)

    def test_unknown_timezone_aborts_record(self, auth_payload):
        auth_payload["server_info"]["timezone"] = "Not/AZone"
        with pytest.raises(ValidationError, match="Not/AZone"):
            AuthenticationResponse.model_validate(auth_payload)

    def test_region_name_timezone_aborts_record(self, auth_payload):
        auth_payload["server_info"]["timezone"] = "Europe"
        with pytest.raises(ValidationError, match="Europe"):
            AuthenticationResponse.model_validate(auth_payload)

    def test_accepts_constructed_codec_values(self, auth_payload):
        auth_payload["user_info"]["auth"] = FlexibleBoolean(True, Shape.QUOTED)
        response = AuthenticationResponse.model_validate(auth_payload)
        assert response.model_dump()["user_info"]["auth"] == "1"


# =========================================================================
# Catalog
# =========================================================================


class TestCatalogModels:
    def test_category_type_not_dumped(self):
        category = Category.model_validate(
            {"category_id": "12", "category_name": "News", "parent_id": 0}
        )
        category.type = "live"
        assert category.category_id == 12
        assert category.model_dump() == {
            "category_id": "12",
            "category_name": "News",
            "parent_id": 0,
        }

    def test_stream_archive_duration_is_not_requoted(self):
        stream = Stream.model_validate(
            {
                "num": 1,
                "name": "News HD",
                "stream_type": "live",
                "stream_id": 1001,
                "added": "1600000000",
                "category_id": "12",
                "tv_archive": 1,
                "tv_archive_duration": " 3 ",
                "rating_5based": 4.5,
            }
        )
        assert stream.tv_archive_duration == 3
        dumped = stream.model_dump()
        assert dumped["tv_archive_duration"] == 3
        assert dumped["added"] == "1600000000"
        assert dumped["category_id"] == "12"

    @pytest.mark.parametrize(
        "backdrop,items",
        [
            ("http://img/a.jpg", ["http://img/a.jpg"]),
            (["http://img/a.jpg", "http://img/b.jpg"], ["http://img/a.jpg", "http://img/b.jpg"]),
        ],
    )
    def test_series_backdrop_shapes(self, backdrop, items):
        series = SeriesInfo.model_validate(
            {
                "name": "Show",
                "series_id": 7,
                "backdrop_path": backdrop,
                "last_modified": 1700000000,
                "rating": "8",
            }
        )
        assert list(series.backdrop_path) == items
        dumped = series.model_dump()
        assert dumped["backdrop_path"] == backdrop
        assert dumped["last_modified"] == 1700000000
        assert dumped["rating"] == "8"

    def test_vod_info(self):
        vod = VideoOnDemandInfo.model_validate(
            {
                "info": {
                    "backdrop_path": ["http://img/a.jpg"],
                    "duration_secs": 5400,
                    "video": {"index": 0, "codec_name": "h264", "width": 1920},
                },
                "movie_data": {
                    "stream_id": 55,
                    "name": "Film",
                    "added": "1600000000",
                    "category_id": "3",
                    "container_extension": "mkv",
                },
            }
        )
        assert vod.info.video.codec_name == "h264"
        assert vod.info.video.model_extra == {"width": 1920}
        assert vod.movie_data.added.shape is Shape.QUOTED
        assert vod.movie_data.category_id == 3


# =========================================================================
# EPG
# =========================================================================


class TestEPG:
    LISTING = {
        "id": "901",
        "epg_id": "4",
        "title": "TmV3cyBhdCA5",
        "description": "aGVsbG8gd29ybGQ=",
        "lang": "en",
        "start": "2023-11-14 21:00:00",
        "end": "2023-11-14 22:00:00",
        "channel_id": "news.uk",
        "start_timestamp": "1699995600",
        "stop_timestamp": "1699999200",
        "now_playing": 0,
        "has_archive": "1",
    }

    def test_decodes_base64_text(self):
        container = EPGContainer.model_validate({"epg_listings": [self.LISTING]})
        listing = container.epg_listings[0]
        assert listing.title == "News at 9"
        assert listing.description == "hello world"
        assert listing.has_archive.value is True
        assert listing.now_playing.value is False
        assert listing.start_timestamp.shape is Shape.QUOTED

    def test_dump_reencodes(self):
        container = EPGContainer.model_validate({"epg_listings": [self.LISTING]})
        dumped = container.model_dump()["epg_listings"][0]
        assert dumped == self.LISTING

    def test_invalid_base64_aborts_record(self):
        listing = dict(self.LISTING, title="not base64!")
        with pytest.raises(ValidationError):
            EPGContainer.model_validate({"epg_listings": [listing]})
