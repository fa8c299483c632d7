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


"""Tests for static path construction."""

import httpx
import pytest

from twitch_helix.exceptions import InvalidPathError
from twitch_helix.url import ApiFamily, StaticPath, helix_path, oauth_path


class TestApiFamily:
    """Tests for the API family roots."""

    def test_roots(self):
        assert ApiFamily.HELIX.root == "https://api.twitch.tv/helix"
        assert ApiFamily.OAUTH.root == "https://id.twitch.tv"


class TestStaticPath:
    """Tests for StaticPath."""

    def test_helix_path(self):
        """Segments are joined below the Helix root with no trailing slash."""
        path = helix_path("channels", "commercial")
        assert path.family is ApiFamily.HELIX
        assert str(path.url()) == "https://api.twitch.tv/helix/channels/commercial"

    def test_oauth_path(self):
        path = oauth_path("oauth2", "validate")
        assert str(path.url()) == "https://id.twitch.tv/oauth2/validate"

    def test_no_query_without_pairs(self):
        """An empty query leaves no '?' in the URL."""
        url = helix_path("games").url([])
        assert isinstance(url, httpx.URL)
        assert str(url) == "https://api.twitch.tv/helix/games"
        assert url.query == b""

    def test_query_pairs_keep_insertion_order(self):
        url = helix_path("search", "channels").url(
            [("query", "abc"), ("first", "10"), ("after", "xyz")]
        )
        assert url.query == b"query=abc&first=10&after=xyz"

    def test_segments_are_converted_to_tuple(self):
        path = StaticPath(ApiFamily.HELIX, ["bits", "cheermotes"])
        assert path.segments == ("bits", "cheermotes")

    def test_str_is_base_url(self):
        assert str(helix_path("channels")) == "https://api.twitch.tv/helix/channels"

    @pytest.mark.parametrize(
        "segments",
        [
            ("channels/commercial",),
            ("channels", ""),
            ("bad segment",),
            ("?query",),
            ("..",),
        ],
    )
    def test_invalid_segment(self, segments):
        """Malformed segments are rejected when the path is built."""
        with pytest.raises(InvalidPathError):
            helix_path(*segments)

    def test_empty_path(self):
        with pytest.raises(InvalidPathError, match="at least one segment"):
            helix_path()

    def test_paths_are_values(self):
        assert helix_path("games") == helix_path("games")
        assert helix_path("games") != oauth_path("games")
