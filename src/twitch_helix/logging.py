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


"""Logging setup for applications using the Twitch Helix client.

Library modules only create loggers with ``logging.getLogger(__name__)``.
Handlers are installed by the host application, for example the
``twitch-helix`` command line, through :func:`setup_logging`.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

# Map log level strings to Python logging levels
LOG_LEVEL_MAP = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class LogConfig:
    """Configuration for client logging.

    Attributes:
        level: Log level (trace, debug, info, warn, error, critical)
        format: Log format (json or text)
        file_path: Optional path to write logs to instead of stderr
    """

    level: str = "info"
    format: str = "json"
    file_path: Path | None = None

    @property
    def log_level(self) -> int:
        """The ``logging`` level for :attr:`level`, ``INFO`` if unknown."""
        return LOG_LEVEL_MAP.get(self.level.lower(), logging.INFO)


class StructuredJsonFormatter(logging.Formatter):
    """Formats each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(config: LogConfig | None = None) -> logging.Handler:
    """Configure the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Args:
        config: Logging configuration. Defaults to JSON at INFO on stderr.

    Returns:
        The handler that was installed
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    handler: logging.Handler
    if config.file_path:
        handler = logging.FileHandler(config.file_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.log_level)

    if config.format == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(StructuredJsonFormatter())

    root_logger.addHandler(handler)
    return handler


__all__ = ["LogConfig", "StructuredJsonFormatter", "setup_logging"]
