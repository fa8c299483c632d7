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

"""Response envelopes and decoding.

Every Helix body is either a success, wrapped in a ``data`` field with an
optional ``pagination`` field, or an error object with ``status``,
``message`` and an optional ``error``. OAuth bodies are the same except that
a success is the bare payload. Neither carries an explicit discriminator, so
decoding tries the success shape first and falls back to the error shape;
when both fail the body is reported as undecodable.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Generic, TypeVar, Union

import msgspec
from attrs import frozen
from msgspec import Struct

from .exceptions import ApiError, DecodeError
from .pagination import Pagination, WirePagination

T = TypeVar("T")


class _HelixBody(Struct, Generic[T]):
    """Wire shape of a successful Helix response."""

    data: T
    pagination: WirePagination | None = None


class ResponseError(Struct, frozen=True):
    """An error reported by the API.

    Twitch errors always carry a status and a message, and sometimes a short
    error kind such as ``"Unauthorized"``.
    """

    status: int
    message: str
    error: str | None = None

    @property
    def is_ok(self) -> bool:
        return False

    def into_result(self) -> Any:
        """Raise this error as an :class:`~twitch_helix.exceptions.ApiError`."""
        raise ApiError(self)

    def __str__(self) -> str:
        return f"{self.status}: {self.message} ({self.error!r})"


@frozen
class ResponseData(Generic[T]):
    """A successfully decoded payload plus its pagination, if any.

    ``pagination`` is ``None`` for unpaginated endpoints, for OAuth responses,
    and when Helix omits the field.
    """

    data: T
    pagination: Pagination | None = None

    @property
    def is_ok(self) -> bool:
        return True

    def into_result(self) -> T:
        """Return the payload."""
        return self.data

    def cursor(self) -> str | None:
        """Shortcut for ``pagination.as_cursor()``."""
        if self.pagination is None:
            return None
        return self.pagination.as_cursor()


HelixResponse = Union[ResponseData[T], ResponseError]
OAuthResponse = Union[ResponseData[T], ResponseError]

_error_decoder = msgspec.json.Decoder(ResponseError)


@lru_cache(maxsize=None)
def _helix_decoder(payload_type: Any) -> msgspec.json.Decoder:
    return msgspec.json.Decoder(_HelixBody[payload_type])


@lru_cache(maxsize=None)
def _oauth_decoder(payload_type: Any) -> msgspec.json.Decoder:
    return msgspec.json.Decoder(payload_type)


def _decode_error(body: bytes | str, success_cause: Exception) -> ResponseError:
    try:
        return _error_decoder.decode(body)
    except msgspec.DecodeError as e:
        raise DecodeError(
            "Response body matched neither the success nor the error shape: "
            f"success: {success_cause}; error: {e}",
            success_cause=success_cause,
            error_cause=e,
        ) from e


def decode_helix(body: bytes | str, payload_type: Any) -> HelixResponse[Any]:
    """Decode a Helix response body.

    Args:
        body: Raw JSON body
        payload_type: Type expected under ``data`` (e.g. ``list[Channel]``)

    Returns:
        ``ResponseData`` on success, ``ResponseError`` for an API error

    Raises:
        DecodeError: If the body is not JSON or matches neither shape
    """
    try:
        decoded = _helix_decoder(payload_type).decode(body)
    except msgspec.ValidationError as e:
        return _decode_error(body, e)
    except msgspec.DecodeError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}") from e

    pagination = None
    if decoded.pagination is not None:
        pagination = Pagination.from_wire(decoded.pagination)
    return ResponseData(data=decoded.data, pagination=pagination)


def decode_oauth(body: bytes | str, payload_type: Any) -> OAuthResponse[Any]:
    """Decode an OAuth response body, whose success form is the bare payload.

    Raises:
        DecodeError: If the body is not JSON or matches neither shape
    """
    try:
        decoded = _oauth_decoder(payload_type).decode(body)
    except msgspec.ValidationError as e:
        return _decode_error(body, e)
    except msgspec.DecodeError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}") from e

    return ResponseData(data=decoded)
