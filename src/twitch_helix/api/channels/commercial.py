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

"""Start a commercial: ``POST /helix/channels/commercial``."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, ClassVar

from attrs import field, frozen
from msgspec import Struct

from ...request import HelixRequest, HttpMethod, QueryPairs
from ...url import StaticPath, helix_path


class Length(IntEnum):
    """Allowed commercial lengths, in seconds."""

    SECONDS_30 = 30
    SECONDS_60 = 60
    SECONDS_90 = 90
    SECONDS_120 = 120
    SECONDS_150 = 150
    SECONDS_180 = 180

    @property
    def secs(self) -> int:
        return int(self)


class Commercial(Struct, frozen=True):
    """The commercial that was started."""

    length: int
    retry_after: int
    message: str = ""


@frozen
class CommercialRequest(HelixRequest):
    """Start a commercial on a channel.

    ``length`` accepts a :class:`Length` or its number of seconds; any other
    value raises ``ValueError`` on construction.

    Example:
        ```python
        request = CommercialRequest("my-channel-id", Length.SECONDS_30)
        request.url().query  # b"broadcaster_id=my-channel-id&length=30"
        ```
    """

    path: ClassVar[StaticPath] = helix_path("channels", "commercial")
    # The API answers with a one-element array.
    response_type: ClassVar[Any] = tuple[Commercial]

    broadcaster_id: str
    length: Length = field(converter=Length)

    def query_pairs(self) -> QueryPairs:
        return (
            QueryPairs()
            .add("broadcaster_id", self.broadcaster_id)
            .add("length", self.length.secs)
        )

    def http_method(self) -> HttpMethod:
        return HttpMethod.POST


__all__ = ["Commercial", "CommercialRequest", "Length"]
