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

"""Analytics report endpoints and their shared types."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from msgspec import Struct


class ReportType(str, Enum):
    """Type of analytics report."""

    OVERVIEW_V1 = "overview_v1"
    OVERVIEW_V2 = "overview_v2"


class DateRange(Struct, frozen=True):
    """Reporting window of a report, in UTC."""

    started_at: datetime
    ended_at: datetime


__all__ = ["DateRange", "ReportType"]
