# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Exceptions raised by the scoring engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utility_reliability.data.models import Report


class ReportValidationError(ValueError):
    """A report carries a value the engine refuses to score."""

    def __init__(self, report: Report, reason: str) -> None:
        self.report = report
        self.reason = reason
        ident = report.id or f"{report.utility_type.value}@{report.created_at.isoformat()}"
        super().__init__(f"Invalid report {ident}: {reason}")
