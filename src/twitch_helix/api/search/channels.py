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

"""Channel search: ``GET /helix/search/channels``."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any, ClassVar

import msgspec
from attrs import evolve, frozen
from msgspec import Struct

from ...request import HelixRequest, QueryPairs
from ...url import StaticPath, helix_path
from ...util import find_ignore_case, parse_utc_date_time


class Channel(Struct, frozen=True):
    """A channel matching the search query."""

    id: str
    display_name: str
    broadcaster_language: str = ""
    broadcaster_login: str = ""
    game_id: str = ""
    game_name: str = ""
    is_live: bool = False
    tag_ids: list[str] = msgspec.field(default_factory=list)
    tags: list[str] = msgspec.field(default_factory=list)
    thumbnail_url: str = ""
    title: str = ""
    # Empty when the channel is offline.
    started_at: str = ""

    @property
    def started_at_utc(self) -> datetime | None:
        """``started_at`` as a UTC date-time, ``None`` when offline."""
        return parse_utc_date_time(self.started_at)


@frozen
class SearchChannelsRequest(HelixRequest):
    """Search channels by a query string.

    Example:
        ```python
        request = (
            SearchChannelsRequest("my-channel")
            .with_first(100)
            .with_after("my-cursor")
            .with_live_only(True)
        )
        request.url().query
        # b"query=my-channel&first=100&after=my-cursor&live_only=true"
        ```
    """

    path: ClassVar[StaticPath] = helix_path("search", "channels")
    response_type: ClassVar[Any] = list[Channel]

    query: str
    first: int | None = None
    after: str | None = None
    live_only: bool | None = None

    def with_first(self, first: int) -> SearchChannelsRequest:
        """Set the maximum number of objects to return."""
        return evolve(self, first=first)

    def with_after(self, after: str) -> SearchChannelsRequest:
        """Set the cursor for forward pagination."""
        return evolve(self, after=after)

    def with_live_only(self, live_only: bool) -> SearchChannelsRequest:
        """Restrict results to live channels."""
        return evolve(self, live_only=live_only)

    def query_pairs(self) -> QueryPairs:
        return (
            QueryPairs()
            .add("query", self.query)
            .add_optional("first", self.first)
            .add_optional("after", self.after)
            .add_optional("live_only", self.live_only)
        )

    def channel(self, channels: Iterable[Channel]) -> Channel | None:
        """Return the channel whose display name equals the query, ignoring case."""
        return find_ignore_case(
            channels, self.query, key=lambda channel: channel.display_name
        )


__all__ = ["Channel", "SearchChannelsRequest"]
