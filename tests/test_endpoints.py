# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.


"""Tests for the endpoint definitions."""

import json
from datetime import UTC, datetime

import pytest

from twitch_helix.api.analytics import DateRange, ReportType
from twitch_helix.api.analytics.extensions import (
    ExtensionAnalyticsRequest,
    ExtensionReport,
)
from twitch_helix.api.analytics.games import GameAnalyticsRequest, GameReport
from twitch_helix.api.bits import Cheermote, CheermotesRequest
from twitch_helix.api.channels import (
    Channel,
    ChannelInfoRequest,
    Commercial,
    CommercialRequest,
    Length,
)
from twitch_helix.api.games import Game, GameById, GameByName
from twitch_helix.api.oauth import ValidateRequest, Validation
from twitch_helix.api.search import SearchChannelsRequest
from twitch_helix.api.search import Channel as SearchChannel
from twitch_helix.request import HttpMethod
from twitch_helix.response import decode_helix

STARTED = datetime(2018, 1, 1, tzinfo=UTC)
ENDED = datetime(2018, 3, 1, tzinfo=UTC)


def query_keys(request) -> list[str]:
    return [key for key, _ in request.url().params.multi_items()]


class TestChannelInfo:
    """Tests for GET /helix/channels."""

    def test_url(self):
        request = ChannelInfoRequest("44322889")
        assert (
            str(request.url())
            == "https://api.twitch.tv/helix/channels?broadcaster_id=44322889"
        )
        assert request.http_method() is HttpMethod.GET
        assert request.response_type == list[Channel]

    def test_channel_lookup(self):
        request = ChannelInfoRequest("AbC")
        channels = [Channel(broadcast_id="xyz"), Channel(broadcast_id="abc")]
        assert request.channel(channels) is channels[1]

    def test_channel_lookup_empty(self):
        assert ChannelInfoRequest("abc").channel([]) is None


class TestCommercial:
    """Tests for POST /helix/channels/commercial."""

    def test_url_and_method(self):
        request = CommercialRequest("my-channel-id", Length.SECONDS_30)
        assert request.url().path == "/helix/channels/commercial"
        assert request.url().query == b"broadcaster_id=my-channel-id&length=30"
        assert request.http_method() is HttpMethod.POST

    def test_length_from_seconds(self):
        assert CommercialRequest("id", 180).length is Length.SECONDS_180

    def test_invalid_length(self):
        with pytest.raises(ValueError):
            CommercialRequest("id", 45)

    def test_length_values(self):
        assert [length.secs for length in Length] == [30, 60, 90, 120, 150, 180]

    def test_decodes_single_commercial(self):
        request = CommercialRequest("my-channel-id", Length.SECONDS_30)
        response = decode_helix(
            json.dumps(
                {"data": [{"length": 30, "message": "", "retry_after": 480}]}
            ).encode(),
            request.response_type,
        )
        (commercial,) = response.into_result()
        assert commercial == Commercial(length=30, retry_after=480, message="")


class TestGames:
    """Tests for GET /helix/games."""

    GAMES = [
        Game(id="33214", name="Fortnite"),
        Game(id="27471", name="Minecraft"),
    ]

    def test_by_id_url(self):
        assert str(GameById("33214").url()) == "https://api.twitch.tv/helix/games?id=33214"

    def test_by_name_url(self):
        assert (
            str(GameByName("Minecraft").url())
            == "https://api.twitch.tv/helix/games?name=Minecraft"
        )

    def test_game_lookup(self):
        assert GameById("27471").game(self.GAMES) is self.GAMES[1]
        assert GameByName("fortNITE").game(self.GAMES) is self.GAMES[0]

    def test_game_lookup_by_name_ignores_id(self):
        assert GameByName("33214").game(self.GAMES) is None

    def test_variants_share_endpoint(self):
        assert GameById("1").path == GameByName("x").path
        assert GameById("1").response_type == list[Game]


class TestSearchChannels:
    """Tests for GET /helix/search/channels."""

    def test_required_only(self):
        request = SearchChannelsRequest("speedrun")
        assert (
            str(request.url())
            == "https://api.twitch.tv/helix/search/channels?query=speedrun"
        )

    def test_all_parameters(self):
        request = (
            SearchChannelsRequest("my-channel")
            .with_first(100)
            .with_after("my-cursor")
            .with_live_only(True)
        )
        assert (
            request.url().query
            == b"query=my-channel&first=100&after=my-cursor&live_only=true"
        )

    def test_setters_do_not_mutate(self):
        request = SearchChannelsRequest("speedrun")
        paged = request.with_after("cursor")
        assert request.after is None
        assert paged.after == "cursor"
        assert paged.query == "speedrun"

    def test_live_only_false_is_sent(self):
        request = SearchChannelsRequest("speedrun").with_live_only(False)
        assert request.url().params["live_only"] == "false"

    def test_channel_lookup(self):
        channels = [
            SearchChannel(id="1", display_name="SpeedRunner"),
            SearchChannel(id="2", display_name="speedrun"),
        ]
        assert SearchChannelsRequest("SPEEDRUN").channel(channels) is channels[1]
        assert SearchChannelsRequest("other").channel(channels) is None

    def test_started_at(self):
        live = SearchChannel(id="1", display_name="a", started_at="2020-03-18T17:56:00Z")
        offline = SearchChannel(id="2", display_name="b")
        assert live.started_at_utc == datetime(2020, 3, 18, 17, 56, tzinfo=UTC)
        assert offline.started_at_utc is None


class TestExtensionAnalytics:
    """Tests for GET /helix/analytics/extensions."""

    def test_no_parameters(self):
        request = ExtensionAnalyticsRequest()
        assert str(request.url()) == "https://api.twitch.tv/helix/analytics/extensions"

    def test_parameter_order(self):
        request = (
            ExtensionAnalyticsRequest()
            .with_report_type(ReportType.OVERVIEW_V2)
            .with_started_at(STARTED)
            .with_first(5)
            .with_extension_id("abcd")
            .with_ended_at(ENDED)
            .with_after("cursor")
        )
        assert query_keys(request) == [
            "after",
            "ended_at",
            "extension_id",
            "first",
            "started_at",
            "type",
        ]
        params = request.url().params
        assert params["type"] == "overview_v2"
        assert params["started_at"] == "2018-01-01T00:00:00+00:00"
        assert params["ended_at"] == "2018-03-01T00:00:00+00:00"

    def test_decode_report(self):
        response = decode_helix(
            json.dumps(
                {
                    "data": [
                        {
                            "extension_id": "efgh",
                            "URL": "https://twitch-piper-reports.s3.amazonaws.com/r.csv",
                            "type": "overview_v2",
                            "date_range": {
                                "started_at": "2018-03-01T00:00:00Z",
                                "ended_at": "2018-06-01T00:00:00Z",
                            },
                        }
                    ],
                    "pagination": {"cursor": "eyJiIjpudWxs"},
                }
            ).encode(),
            ExtensionAnalyticsRequest.response_type,
        )
        (report,) = response.data
        assert report.url.endswith("r.csv")
        assert report.report_type is ReportType.OVERVIEW_V2
        assert report.date_range == DateRange(
            started_at=datetime(2018, 3, 1, tzinfo=UTC),
            ended_at=datetime(2018, 6, 1, tzinfo=UTC),
        )
        assert response.cursor() == "eyJiIjpudWxs"

    def test_extension_lookup(self):
        reports = [
            ExtensionReport(
                extension_id="EFGH", url="u", report_type=ReportType.OVERVIEW_V1
            )
        ]
        request = ExtensionAnalyticsRequest().with_extension_id("efgh")
        assert request.extension(reports) is reports[0]
        assert ExtensionAnalyticsRequest().extension(reports) is None


class TestGameAnalytics:
    """Tests for GET /helix/analytics/games."""

    def test_no_parameters(self):
        assert (
            str(GameAnalyticsRequest().url())
            == "https://api.twitch.tv/helix/analytics/games"
        )

    def test_parameter_order(self):
        request = GameAnalyticsRequest(
            first=10, game_id="493057", report_type=ReportType.OVERVIEW_V1
        )
        assert query_keys(request) == ["game_id", "first", "type"]

    def test_game_lookup(self):
        reports = [
            GameReport(game_id="493057", url="u", report_type=ReportType.OVERVIEW_V2)
        ]
        assert GameAnalyticsRequest(game_id="493057").game(reports) is reports[0]
        assert GameAnalyticsRequest(game_id="1").game(reports) is None


class TestCheermotes:
    """Tests for GET /helix/bits/cheermotes."""

    def test_url(self):
        assert (
            str(CheermotesRequest("41245072").url())
            == "https://api.twitch.tv/helix/bits/cheermotes?broadcaster_id=41245072"
        )

    def test_decode_and_lookup(self):
        response = decode_helix(
            json.dumps(
                {
                    "data": [
                        {
                            "prefix": "Cheer",
                            "tiers": [
                                {
                                    "min_bits": 1,
                                    "id": "1",
                                    "color": "#979797",
                                    "images": {},
                                    "can_cheer": True,
                                    "show_in_bits_card": True,
                                }
                            ],
                            "type": "global_first_party",
                            "order": 1,
                            "last_updated": "2018-05-22T00:06:04Z",
                            "is_charitable": False,
                        }
                    ]
                }
            ).encode(),
            CheermotesRequest.response_type,
        )
        request = CheermotesRequest("41245072")
        cheermote = request.cheermote(response.data, "cheer")
        assert isinstance(cheermote, Cheermote)
        assert cheermote.cheermote_type == "global_first_party"
        assert cheermote.tiers[0].min_bits == 1
        assert cheermote.last_updated == datetime(2018, 5, 22, 0, 6, 4, tzinfo=UTC)
        assert request.cheermote(response.data, "Kappa") is None


class TestValidate:
    """Tests for GET https://id.twitch.tv/oauth2/validate."""

    def test_url(self):
        request = ValidateRequest()
        assert str(request.url()) == "https://id.twitch.tv/oauth2/validate"
        assert request.response_type is Validation
