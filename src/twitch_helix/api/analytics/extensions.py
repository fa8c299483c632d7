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

"""Extension analytics: ``GET /helix/analytics/extensions``.

Returns download URLs for extension analytics reports.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any, ClassVar

import msgspec
from attrs import evolve, frozen
from msgspec import Struct

from ...request import HelixRequest, QueryPairs
from ...url import StaticPath, helix_path
from ...util import find_ignore_case
from . import DateRange, ReportType


class ExtensionReport(Struct, frozen=True):
    """A downloadable extension analytics report."""

    extension_id: str
    url: str = msgspec.field(name="URL")
    report_type: ReportType = msgspec.field(name="type")
    date_range: DateRange | None = None


@frozen
class ExtensionAnalyticsRequest(HelixRequest):
    """Get URLs of extension analytics reports.

    Every parameter is optional; with none set the URL has no query string.
    """

    path: ClassVar[StaticPath] = helix_path("analytics", "extensions")
    response_type: ClassVar[Any] = list[ExtensionReport]

    after: str | None = None
    ended_at: datetime | None = None
    extension_id: str | None = None
    first: int | None = None
    started_at: datetime | None = None
    report_type: ReportType | None = None

    def with_after(self, after: str) -> ExtensionAnalyticsRequest:
        return evolve(self, after=after)

    def with_ended_at(self, ended_at: datetime) -> ExtensionAnalyticsRequest:
        return evolve(self, ended_at=ended_at)

    def with_extension_id(self, extension_id: str) -> ExtensionAnalyticsRequest:
        return evolve(self, extension_id=extension_id)

    def with_first(self, first: int) -> ExtensionAnalyticsRequest:
        return evolve(self, first=first)

    def with_started_at(self, started_at: datetime) -> ExtensionAnalyticsRequest:
        return evolve(self, started_at=started_at)

    def with_report_type(self, report_type: ReportType) -> ExtensionAnalyticsRequest:
        return evolve(self, report_type=report_type)

    def query_pairs(self) -> QueryPairs:
        return (
            QueryPairs()
            .add_optional("after", self.after)
            .add_optional("ended_at", self.ended_at)
            .add_optional("extension_id", self.extension_id)
            .add_optional("first", self.first)
            .add_optional("started_at", self.started_at)
            .add_optional("type", self.report_type)
        )

    def extension(self, reports: Iterable[ExtensionReport]) -> ExtensionReport | None:
        """Return the report for the requested extension id, ignoring case.

        Always ``None`` when no ``extension_id`` was requested.
        """
        if self.extension_id is None:
            return None
        return find_ignore_case(
            reports, self.extension_id, key=lambda report: report.extension_id
        )


__all__ = ["ExtensionAnalyticsRequest", "ExtensionReport"]
