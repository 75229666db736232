# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Reliability scoring engine.

Turns the reports filed against one building into a score per utility and
a composite score for the building.  Each report is weighted by its age:

    age <= fresh_days        -> fresh_weight (1.0)
    age <= stale_days        -> stale_weight (0.5)
    older                    -> excluded from the average

Excluded reports still count when deciding which report is the latest,
so a utility can carry a status without having a score.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from utility_reliability.config import ScoringConfig
from utility_reliability.data.models import (
    BuildingScore,
    Report,
    Status,
    UtilityScore,
    UtilityType,
)
from utility_reliability.errors import ReportValidationError
from utility_reliability.scoring.weights import EXPIRED_WEIGHT, SCORE_MAX, SCORE_MIN

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Return *now* as an aware datetime, defaulting to the wall clock."""
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def age_in_days(created_at: datetime, now: datetime) -> int:
    """Whole days between *created_at* and *now*, floored.

    Reports dated in the future (clock skew) are treated as zero days old.
    """
    return max(0, (now - created_at) // _ONE_DAY)


def recency_weight(age_days: int, config: ScoringConfig | None = None) -> float:
    """Weight of a report that is *age_days* old."""
    cfg = config or ScoringConfig()
    if age_days <= cfg.fresh_days:
        return cfg.fresh_weight
    if age_days <= cfg.stale_days:
        return cfg.stale_weight
    return EXPIRED_WEIGHT


def status_value(status: Status | str, config: ScoringConfig | None = None) -> Optional[int]:
    """Base value of *status* on the 0-100 scale, or None if unrecognised."""
    cfg = config or ScoringConfig()
    if isinstance(status, Status):
        return cfg.status_values[status]
    try:
        return cfg.status_values[Status(status)]
    except ValueError:
        return None


def _recency_key(report: Report) -> tuple[datetime, bool, str]:
    return report.created_at, report.id is not None, report.id or ""


def latest_report(reports: Iterable[Report]) -> Optional[Report]:
    """Most recent report by timestamp.

    Ties on timestamp go to the highest id; reports without an id lose to
    any report that has one.  Remaining ties keep the first in input order.
    """
    latest: Optional[Report] = None
    for report in reports:
        if latest is None or _recency_key(report) > _recency_key(latest):
            latest = report
    return latest


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class ScoreEngine:
    """Computes per-utility and composite reliability scores.

    The engine holds only its configuration and is safe to share between
    threads.

    Usage::

        engine = ScoreEngine()
        result = engine.score_building(reports)
        result.composite, result.has_data
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def score_utility(
        self,
        reports: Iterable[Report],
        utility_type: UtilityType,
        now: Optional[datetime] = None,
    ) -> UtilityScore:
        """Score one utility from the full report set of a building.

        Args:
            reports: Every report for the building, in any order.
            utility_type: The utility to score; other reports are ignored.
            now: Reference time for report ages.  Defaults to the wall clock.

        Returns:
            A ``UtilityScore``.  ``score`` is None when no report is recent
            enough to count; ``status`` and ``last_report_at`` describe the
            latest report whatever its age.
        """
        now = resolve_now(now)
        matching = [r for r in reports if r.utility_type == utility_type]
        if not matching:
            return UtilityScore()

        total_weighted = 0.0
        total_weight = 0.0
        for report in matching:
            value = self._value_of(report)
            weight = recency_weight(age_in_days(report.created_at, now), self.config)
            if weight <= 0:
                continue
            total_weighted += value * weight
            total_weight += weight

        score = None
        if total_weight > 0:
            score = min(SCORE_MAX, max(SCORE_MIN, round_half_up(total_weighted / total_weight)))

        latest = latest_report(matching)
        logger.debug(
            "%s: %d reports, weight %.1f, score %s",
            utility_type.value, len(matching), total_weight, score,
        )
        return UtilityScore(
            score=score,
            status=latest.status,
            last_report_at=latest.created_at,
        )

    def score_building(
        self,
        reports: Iterable[Report],
        now: Optional[datetime] = None,
    ) -> BuildingScore:
        """Score every utility and average the ones that have a score.

        Utilities without a score are left out of the composite rather than
        counted as zero.
        """
        reports = list(reports)
        now = resolve_now(now)
        utilities = {
            utility: self.score_utility(reports, utility, now)
            for utility in UtilityType
        }

        valid = [u.score for u in utilities.values() if u.score is not None]
        composite = round_half_up(sum(valid) / len(valid)) if valid else None

        return BuildingScore(composite=composite, utilities=utilities)

    def recent_reports(
        self,
        reports: Iterable[Report],
        now: Optional[datetime] = None,
    ) -> list[Report]:
        """Reports young enough to carry weight (age <= stale_days)."""
        now = resolve_now(now)
        return [
            r for r in reports
            if age_in_days(r.created_at, now) <= self.config.stale_days
        ]

    def _value_of(self, report: Report) -> int:
        value = status_value(report.status, self.config)
        if value is not None:
            return value
        if self.config.unknown_status == "strict":
            raise ReportValidationError(report, f"unknown status {report.status!r}")
        logger.warning(
            "Unknown status %r on %s report %s; scoring as %d",
            report.status, report.utility_type.value,
            report.id or report.created_at.isoformat(),
            self.config.unknown_status_value,
        )
        return self.config.unknown_status_value
