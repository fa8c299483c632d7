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

"""Pagination cursors attached to Helix responses."""

from __future__ import annotations

from attrs import frozen
from msgspec import Struct


class PaginationObject(Struct):
    """Object form of the ``pagination`` field.

    An absent or ``null`` cursor means there are no further pages.
    """

    cursor: str | None = None


# Wire shape of the ``pagination`` field: a bare string or an object.
WirePagination = str | PaginationObject


@frozen
class Pagination:
    """The position of a page within a paginated result set.

    Feed :meth:`as_cursor` into the ``after`` parameter of a new request of
    the same type to fetch the next page.
    """

    cursor: str | None
    bare: bool = False

    @classmethod
    def from_wire(cls, value: WirePagination) -> Pagination:
        if isinstance(value, str):
            return cls(cursor=value, bare=True)
        return cls(cursor=value.cursor)

    def as_cursor(self) -> str | None:
        """Return the cursor for the next page, or ``None`` on the last page.

        A bare-string pagination value is treated as the cursor itself.
        """
        return self.cursor or None

    @property
    def has_next_page(self) -> bool:
        return self.as_cursor() is not None
