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

"""Exception hierarchy for the Twitch Helix client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from .response import ResponseError


class TwitchHelixError(Exception):
    """Base exception for all Twitch Helix client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPathError(TwitchHelixError):
    """A static endpoint path could not be assembled.

    Raised while an endpoint module is being imported. It always indicates a
    broken endpoint definition, never bad runtime input.
    """

    def __init__(self, segment: str, reason: str):
        super().__init__(f"Invalid path segment {segment!r}: {reason}")
        self.segment = segment


class ConfigError(TwitchHelixError):
    """Client configuration is missing or invalid."""


class DecodeError(TwitchHelixError):
    """A response body matched neither the success nor the error shape."""

    def __init__(
        self,
        message: str,
        success_cause: Exception | None = None,
        error_cause: Exception | None = None,
    ):
        super().__init__(message)
        self.success_cause = success_cause
        self.error_cause = error_cause


class RequestError(TwitchHelixError):
    """Base class for failures while dispatching a request."""

    def __init__(self, message: str, url: httpx.URL | str):
        super().__init__(message)
        self.url = str(url)


class SendError(RequestError):
    """Unable to send the request (DNS, connection, TLS, timeout, ...)."""

    def __init__(self, url: httpx.URL | str):
        super().__init__("Unable to send request", url)


class ParseError(RequestError):
    """A response was received but its body could not be decoded."""

    def __init__(self, url: httpx.URL | str, status_code: int):
        super().__init__("Unable to parse response", url)
        self.status_code = status_code


class ApiError(TwitchHelixError):
    """An API-level error, raised by ``ResponseError.into_result()``.

    The dispatcher itself never raises this; a decoded error body is a normal
    return value that the caller may turn into an exception on demand.
    """

    def __init__(self, response: ResponseError):
        super().__init__(str(response))
        self.response = response
        self.status = response.status
        self.error = response.error
