# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the utility reliability test suite."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import pytest

from utility_reliability.data.models import Building, Report, Status, UtilityType
from utility_reliability.scoring.engine import ScoreEngine

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_report(
    utility: UtilityType | str,
    status: Status | str,
    days_ago: float = 0,
    report_id: Optional[str] = None,
    now: datetime = NOW,
) -> Report:
    """Build a report *days_ago* days before *now*."""
    return Report(
        utility_type=utility,
        status=status,
        created_at=now - timedelta(days=days_ago),
        id=report_id,
    )


@pytest.fixture()
def now() -> datetime:
    """Fixed reference time used across scoring tests."""
    return NOW


@pytest.fixture()
def report() -> Callable[..., Report]:
    """Factory fixture for reports relative to the fixed reference time."""
    return make_report


@pytest.fixture()
def engine() -> ScoreEngine:
    """Engine with the default configuration."""
    return ScoreEngine()


@pytest.fixture()
def sample_buildings() -> list[Building]:
    """Four buildings spanning good, moderate, poor, and no-data ratings."""
    return [
        Building(
            id="kilimani-plaza",
            name="Kilimani Plaza",
            neighbourhood="Kilimani",
            reports=[
                make_report(UtilityType.POWER, Status.FLICKERING, 1),
                make_report(UtilityType.WATER, Status.FLICKERING, 2),
            ],
        ),
        Building(
            id="westlands-square",
            name="Westlands Square",
            neighbourhood="Westlands",
            reports=[
                make_report(UtilityType.POWER, Status.STABLE, 1),
                make_report(UtilityType.WATER, Status.STABLE, 3),
                make_report(UtilityType.INTERNET, Status.STABLE, 5),
            ],
        ),
        Building(
            id="lavington-gardens",
            name="Lavington Gardens",
            neighbourhood="Lavington",
            reports=[make_report(UtilityType.WATER, Status.OUTAGE, 40)],
        ),
        Building(
            id="upperhill-towers",
            name="Upperhill Towers",
            neighbourhood="Upper Hill",
            suspicious=True,
            reports=[
                make_report(UtilityType.POWER, Status.OUTAGE, 0),
                make_report(UtilityType.INTERNET, Status.FLICKERING, 10),
            ],
        ),
    ]
