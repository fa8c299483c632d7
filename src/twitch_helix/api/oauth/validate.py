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

"""Token validation: ``GET https://id.twitch.tv/oauth2/validate``.

The request takes no arguments: the token being validated travels in the
``Authorization`` header.
"""

from __future__ import annotations

from typing import Any, ClassVar

import msgspec
from attrs import frozen
from msgspec import Struct

from ...request import OAuthRequest
from ...url import StaticPath, oauth_path


class Validation(Struct, frozen=True):
    """Information about a valid token.

    ``login`` and ``user_id`` are absent for app access tokens.
    """

    client_id: str
    scopes: list[str] = msgspec.field(default_factory=list)
    login: str | None = None
    user_id: str | None = None
    expires_in: int | None = None


@frozen
class ValidateRequest(OAuthRequest):
    path: ClassVar[StaticPath] = oauth_path("oauth2", "validate")
    response_type: ClassVar[Any] = Validation


__all__ = ["ValidateRequest", "Validation"]
