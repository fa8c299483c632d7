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

"""Request contracts shared by every endpoint definition.

Each endpoint is an immutable value class that knows its static path, its
query parameters and the payload type it decodes to on success. The client
only ever asks a request for its URL and method; it never inspects endpoint
fields directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

import httpx

from .url import ApiFamily, StaticPath
from .util import format_utc_date_time


class HttpMethod(str, Enum):
    """HTTP methods used by Helix endpoints."""

    GET = "GET"
    POST = "POST"
    # Reserved; no endpoint uses it yet.
    PUT = "PUT"


def render_query_value(value: Any) -> str:
    """Render a query value in its canonical wire form."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return render_query_value(value.value)
    if isinstance(value, datetime):
        return format_utc_date_time(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported query value type: {type(value).__name__}")


class QueryPairs:
    """Ordered collection of query parameters.

    Keys are emitted in insertion order. ``add_optional`` skips ``None`` so
    an unset optional parameter never shows up as an empty key.
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def add(self, key: str, value: Any) -> QueryPairs:
        self._pairs.append((key, render_query_value(value)))
        return self

    def add_optional(self, key: str, value: Any | None) -> QueryPairs:
        if value is not None:
            self.add(key, value)
        return self

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


class HelixRequest(ABC):
    """A request against the Helix API.

    Subclasses set two class attributes:

    - ``path``: the :class:`StaticPath` of the endpoint
    - ``response_type``: the payload type found under ``data`` on success

    and implement :meth:`query_pairs`. POST endpoints override
    :meth:`http_method`.
    """

    path: ClassVar[StaticPath]
    response_type: ClassVar[Any]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        path = cls.__dict__.get("path")
        if path is not None and path.family is not ApiFamily.HELIX:
            raise TypeError(f"{cls.__name__}.path must be a Helix path, got {path}")

    @abstractmethod
    def query_pairs(self) -> QueryPairs:
        """Return the dynamic query parameters, in wire order."""

    def url(self) -> httpx.URL:
        """Return this request's absolute URL."""
        return self.path.url(self.query_pairs())

    def http_method(self) -> HttpMethod:
        """Return this request's HTTP method."""
        return HttpMethod.GET


class OAuthRequest(ABC):
    """A request against the OAuth API. Always sent as GET."""

    path: ClassVar[StaticPath]
    response_type: ClassVar[Any]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        path = cls.__dict__.get("path")
        if path is not None and path.family is not ApiFamily.OAUTH:
            raise TypeError(f"{cls.__name__}.path must be an OAuth path, got {path}")

    def url(self) -> httpx.URL:
        """Return this request's absolute URL."""
        return self.path.url()
