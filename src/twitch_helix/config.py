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


"""Client configuration read from the environment.

Reads configuration from environment variables:
- TWITCH_HELIX_OAUTH_TOKEN: OAuth token (required to create a client)
- TWITCH_HELIX_CLIENT_ID: Client id sent with Helix requests
- TWITCH_HELIX_TIMEOUT: Request timeout in seconds (default: 30.0)
- TWITCH_HELIX_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, default: INFO)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .client import DEFAULT_TIMEOUT, Client
from .exceptions import ConfigError
from .logging import LogConfig

ENV_OAUTH_TOKEN = "TWITCH_HELIX_OAUTH_TOKEN"
ENV_CLIENT_ID = "TWITCH_HELIX_CLIENT_ID"
ENV_TIMEOUT = "TWITCH_HELIX_TIMEOUT"
ENV_LOG_LEVEL = "TWITCH_HELIX_LOG_LEVEL"


@dataclass
class ClientConfig:
    """Settings needed to build a :class:`~twitch_helix.client.Client`."""

    oauth_token: str | None = None
    client_id: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Read the configuration from ``environ`` (default: ``os.environ``).

        Raises:
            ConfigError: If ``TWITCH_HELIX_TIMEOUT`` is not a positive number
        """
        if environ is None:
            environ = os.environ

        timeout_str = environ.get(ENV_TIMEOUT)
        timeout = DEFAULT_TIMEOUT
        if timeout_str:
            try:
                timeout = float(timeout_str)
            except ValueError as e:
                raise ConfigError(
                    f"{ENV_TIMEOUT} must be a number, got {timeout_str!r}"
                ) from e
            if timeout <= 0:
                raise ConfigError(f"{ENV_TIMEOUT} must be positive, got {timeout}")

        return cls(
            oauth_token=environ.get(ENV_OAUTH_TOKEN) or None,
            client_id=environ.get(ENV_CLIENT_ID) or None,
            timeout=timeout,
            log_level=environ.get(ENV_LOG_LEVEL, "INFO").upper(),
        )

    def log_config(self, format: str = "json") -> LogConfig:
        return LogConfig(level=self.log_level.lower(), format=format)

    def create_client(self) -> Client:
        """Build a client from this configuration.

        Raises:
            ConfigError: If no OAuth token is configured
        """
        if not self.oauth_token:
            raise ConfigError(f"No OAuth token configured; set {ENV_OAUTH_TOKEN}")
        return Client(self.oauth_token, self.client_id, timeout=self.timeout)

    def __repr__(self) -> str:
        token = "***" if self.oauth_token else None
        return (
            f"ClientConfig(oauth_token={token}, "
            f"client_id={self.client_id}, "
            f"timeout={self.timeout}, "
            f"log_level={self.log_level})"
        )


__all__ = ["ClientConfig"]
