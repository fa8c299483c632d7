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

"""Channel information: ``GET /helix/channels``."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from attrs import frozen
from msgspec import Struct

from ...request import HelixRequest, QueryPairs
from ...url import StaticPath, helix_path
from ...util import find_ignore_case


class Channel(Struct, frozen=True):
    """A channel in the response data."""

    broadcast_id: str
    status: str = ""
    game_id: str = ""
    broadcaster_language: str = ""
    title: str = ""
    description: str = ""


@frozen
class ChannelInfoRequest(HelixRequest):
    """Get information about a channel given its broadcaster id.

    Example:
        ```python
        request = ChannelInfoRequest("44322889")
        str(request.url())  # "https://api.twitch.tv/helix/channels?broadcaster_id=44322889"
        ```
    """

    path: ClassVar[StaticPath] = helix_path("channels")
    response_type: ClassVar[Any] = list[Channel]

    broadcaster_id: str

    def query_pairs(self) -> QueryPairs:
        return QueryPairs().add("broadcaster_id", self.broadcaster_id)

    def channel(self, channels: Iterable[Channel]) -> Channel | None:
        """Return the channel whose id matches this request, ignoring case."""
        return find_ignore_case(
            channels, self.broadcaster_id, key=lambda channel: channel.broadcast_id
        )


__all__ = ["Channel", "ChannelInfoRequest"]
