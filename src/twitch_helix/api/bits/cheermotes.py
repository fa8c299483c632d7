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

"""Cheermotes: ``GET /helix/bits/cheermotes``."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any, ClassVar

import msgspec
from attrs import frozen
from msgspec import Struct

from ...request import HelixRequest, QueryPairs
from ...url import StaticPath, helix_path
from ...util import find_ignore_case


class CheermoteTier(Struct, frozen=True):
    min_bits: int
    id: str
    color: str = ""
    images: dict[str, Any] = msgspec.field(default_factory=dict)
    can_cheer: bool = True
    show_in_bits_card: bool = True


class Cheermote(Struct, frozen=True):
    """A cheermote available on a channel."""

    prefix: str
    tiers: list[CheermoteTier] = msgspec.field(default_factory=list)
    cheermote_type: str = msgspec.field(default="", name="type")
    order: int = 0
    last_updated: datetime | None = None
    is_charitable: bool = False


@frozen
class CheermotesRequest(HelixRequest):
    """List the cheermotes available on a channel."""

    path: ClassVar[StaticPath] = helix_path("bits", "cheermotes")
    response_type: ClassVar[Any] = list[Cheermote]

    broadcaster_id: str

    def query_pairs(self) -> QueryPairs:
        return QueryPairs().add("broadcaster_id", self.broadcaster_id)

    def cheermote(self, cheermotes: Iterable[Cheermote], prefix: str) -> Cheermote | None:
        """Return the cheermote with the given prefix, ignoring case."""
        return find_ignore_case(cheermotes, prefix, key=lambda cheermote: cheermote.prefix)


__all__ = ["Cheermote", "CheermoteTier", "CheermotesRequest"]
