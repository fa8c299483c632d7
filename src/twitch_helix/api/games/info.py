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

"""Game information: ``GET /helix/games``, looked up by id or by name."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar

from attrs import frozen
from msgspec import Struct

from ...request import HelixRequest, QueryPairs
from ...url import StaticPath, helix_path
from ...util import find_ignore_case


class Game(Struct, frozen=True):
    """A game in the response data."""

    id: str
    name: str
    box_art_url: str = ""
    igdb_id: str = ""


class GameRequest(HelixRequest):
    """Base of the two game lookup modes, :class:`GameById` and :class:`GameByName`."""

    path: ClassVar[StaticPath] = helix_path("games")
    response_type: ClassVar[Any] = list[Game]

    @abstractmethod
    def game(self, games: Iterable[Game]) -> Game | None:
        """Return the game matching this request, ignoring case."""


@frozen
class GameById(GameRequest):
    """Look a game up by its id."""

    id: str

    def query_pairs(self) -> QueryPairs:
        return QueryPairs().add("id", self.id)

    def game(self, games: Iterable[Game]) -> Game | None:
        return find_ignore_case(games, self.id, key=lambda game: game.id)


@frozen
class GameByName(GameRequest):
    """Look a game up by its exact name, ignoring case."""

    name: str

    def query_pairs(self) -> QueryPairs:
        return QueryPairs().add("name", self.name)

    def game(self, games: Iterable[Game]) -> Game | None:
        return find_ignore_case(games, self.name, key=lambda game: game.name)


__all__ = ["Game", "GameById", "GameByName", "GameRequest"]
