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

"""HTTP client for the Twitch Helix and OAuth APIs.

The client authenticates, sends and decodes one request/response cycle. It
does not retry, paginate, cache or rate limit; API-level errors are returned
as :class:`~twitch_helix.response.ResponseError` values for the caller to
branch on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from .exceptions import ConfigError, DecodeError, ParseError, SendError
from .request import HelixRequest, HttpMethod, OAuthRequest
from .response import HelixResponse, OAuthResponse, decode_helix, decode_oauth

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

R = TypeVar("R")


class Client:
    """Client for Helix and OAuth requests.

    The OAuth token (and the default client id) are fixed for the lifetime of
    the client; to rotate credentials, create a new client. The client keeps
    no per-call state, so one instance can be shared by concurrent tasks.

    Example:
        ```python
        from twitch_helix import Client
        from twitch_helix.api.channels import ChannelInfoRequest

        async with Client("my-token", client_id="my-client-id") as client:
            request = ChannelInfoRequest("44322889")
            response = await client.request_helix(request)
            if response.is_ok:
                channel = request.channel(response.data)
        ```
    """

    def __init__(
        self,
        oauth_token: str,
        client_id: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the client.

        Args:
            oauth_token: OAuth token, without any ``Bearer``/``OAuth`` prefix
            client_id: Default client id sent with Helix requests
            http_client: Transport to use; if given, the caller owns it
            timeout: Request timeout in seconds for an owned transport
        """
        self._oauth_token = oauth_token
        self._client_id = client_id
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout)
        )

    @property
    def oauth_token(self) -> str:
        return self._oauth_token

    @property
    def client_id(self) -> str | None:
        return self._client_id

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def request_oauth(self, request: OAuthRequest) -> OAuthResponse[Any]:
        """Perform an OAuth request.

        Args:
            request: The request to send

        Returns:
            ``ResponseData`` holding ``request.response_type`` on success, or
            ``ResponseError`` if the API reported an error

        Raises:
            SendError: If the request could not be sent
            ParseError: If the response body could not be decoded
        """
        url = request.url()
        headers = {"Authorization": f"OAuth {self._oauth_token}"}
        response = await self._send(HttpMethod.GET, url, headers)
        return _parse(
            url, response, lambda body: decode_oauth(body, request.response_type)
        )

    async def request_helix(
        self, request: HelixRequest, client_id: str | None = None
    ) -> HelixResponse[Any]:
        """Perform a Helix request.

        Args:
            request: The request to send
            client_id: Client id for this call, overriding the default

        Returns:
            ``ResponseData`` holding ``request.response_type`` on success, or
            ``ResponseError`` if the API reported an error

        Raises:
            ConfigError: If no client id was given here or at construction
            SendError: If the request could not be sent
            ParseError: If the response body could not be decoded
        """
        client_id = client_id or self._client_id
        if not client_id:
            raise ConfigError("A client id is required for Helix requests")

        url = request.url()
        headers = {
            "Authorization": f"Bearer {self._oauth_token}",
            "Client-Id": client_id,
        }
        response = await self._send(request.http_method(), url, headers)
        return _parse(
            url, response, lambda body: decode_helix(body, request.response_type)
        )

    async def _send(
        self, method: HttpMethod, url: httpx.URL, headers: dict[str, str]
    ) -> httpx.Response:
        logger.debug("Sending %s %s", method.value, url)
        try:
            response = await self._http_client.request(method.value, url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Unable to send %s %s: %s", method.value, url, e)
            raise SendError(url) from e
        logger.debug("Received %d for %s %s", response.status_code, method.value, url)
        return response


def _parse(
    url: httpx.URL, response: httpx.Response, decode: Callable[[bytes], R]
) -> R:
    try:
        return decode(response.content)
    except DecodeError as e:
        logger.warning(
            "Unable to parse response from %s (status %d): %s",
            url,
            response.status_code,
            e,
        )
        raise ParseError(url, response.status_code) from e
