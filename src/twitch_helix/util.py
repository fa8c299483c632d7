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

"""Shared helpers for date-times and case-insensitive lookups."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import TypeVar

T = TypeVar("T")


def parse_utc_date_time(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp as sent by Helix.

    Empty strings are used by Helix for "not set" (e.g. ``started_at`` of an
    offline channel) and yield ``None``.

    Raises:
        ValueError: If the value is non-empty and not a valid timestamp.
    """
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def format_utc_date_time(value: datetime) -> str:
    """Render a date-time as RFC 3339 in UTC.

    Naive values are taken to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def eq_ignore_case(left: str, right: str) -> bool:
    """Compare two strings using Unicode case folding."""
    return left.casefold() == right.casefold()


def find_ignore_case(
    items: Iterable[T], needle: str, key: Callable[[T], str]
) -> T | None:
    """Return the first item whose ``key`` equals ``needle`` ignoring case."""
    for item in items:
        if eq_ignore_case(needle, key(item)):
            return item
    return None
