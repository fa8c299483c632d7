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

"""URL construction for the Helix and OAuth API families.

Endpoint paths are declared once, as class attributes, using
:class:`StaticPath`. The segments are validated when the path is built, which
happens when the endpoint module is imported, so a malformed path surfaces as
an import-time :class:`~twitch_helix.exceptions.InvalidPathError` and never at
a call site. Dynamic query parameters are appended afterwards, in the order
the request supplies them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

import httpx
from attrs import field, frozen

from .exceptions import InvalidPathError

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_]+$")


class ApiFamily(Enum):
    """The two backing services, each with a fixed root."""

    HELIX = "https://api.twitch.tv/helix"
    OAUTH = "https://id.twitch.tv"

    @property
    def root(self) -> str:
        return self.value


def _validate_segments(instance: StaticPath, attribute, segments: tuple[str, ...]):
    if not segments:
        raise InvalidPathError("", "a path needs at least one segment")
    for segment in segments:
        if not isinstance(segment, str) or not _SEGMENT_RE.match(segment):
            raise InvalidPathError(str(segment), "must match [A-Za-z0-9_]+")


@frozen
class StaticPath:
    """A validated, fixed path below one API family's root.

    Example:
        ```python
        path = StaticPath(ApiFamily.HELIX, ("channels", "commercial"))
        str(path.url())  # "https://api.twitch.tv/helix/channels/commercial"
        ```
    """

    family: ApiFamily
    segments: tuple[str, ...] = field(converter=tuple, validator=_validate_segments)

    def __attrs_post_init__(self) -> None:
        # Parse once so a bad root/segment combination fails here, not per call.
        parsed = httpx.URL(self.base_url)
        if parsed.scheme != "https" or not parsed.host:
            raise InvalidPathError(self.base_url, "not an absolute https URL")

    @property
    def base_url(self) -> str:
        """The absolute URL without query string and without trailing slash."""
        return "/".join((self.family.root, *self.segments))

    def url(self, query: Iterable[tuple[str, str]] = ()) -> httpx.URL:
        """Build the absolute URL, appending ``query`` pairs in order.

        With no pairs the result carries no query component at all.
        """
        pairs = list(query)
        if not pairs:
            return httpx.URL(self.base_url)
        return httpx.URL(self.base_url, params=pairs)

    def __str__(self) -> str:
        return self.base_url


def helix_path(*segments: str) -> StaticPath:
    """Declare a path on the Helix API (``https://api.twitch.tv/helix/...``)."""
    return StaticPath(ApiFamily.HELIX, segments)


def oauth_path(*segments: str) -> StaticPath:
    """Declare a path on the OAuth API (``https://id.twitch.tv/...``)."""
    return StaticPath(ApiFamily.OAUTH, segments)
