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


"""Typed async client for the Twitch Helix API and OAuth token validation.

Example:
    ```python
    from twitch_helix import Client
    from twitch_helix.api.search import SearchChannelsRequest

    async with Client("my-token", client_id="my-client-id") as client:
        request = SearchChannelsRequest("speedrun").with_first(20)
        response = await client.request_helix(request)
        channels = response.into_result()
        next_page = request.with_after(response.cursor())
    ```
"""

from .client import Client
from .config import ClientConfig
from .exceptions import (
    ApiError,
    ConfigError,
    DecodeError,
    InvalidPathError,
    ParseError,
    RequestError,
    SendError,
    TwitchHelixError,
)
from .logging import LogConfig, setup_logging
from .pagination import Pagination
from .request import HelixRequest, HttpMethod, OAuthRequest, QueryPairs
from .response import (
    HelixResponse,
    OAuthResponse,
    ResponseData,
    ResponseError,
    decode_helix,
    decode_oauth,
)
from .url import ApiFamily, StaticPath, helix_path, oauth_path

__all__ = [
    "ApiError",
    "ApiFamily",
    "Client",
    "ClientConfig",
    "ConfigError",
    "DecodeError",
    "HelixRequest",
    "HelixResponse",
    "HttpMethod",
    "InvalidPathError",
    "LogConfig",
    "OAuthRequest",
    "OAuthResponse",
    "Pagination",
    "ParseError",
    "QueryPairs",
    "RequestError",
    "ResponseData",
    "ResponseError",
    "SendError",
    "StaticPath",
    "TwitchHelixError",
    "decode_helix",
    "decode_oauth",
    "helix_path",
    "oauth_path",
    "setup_logging",
]
