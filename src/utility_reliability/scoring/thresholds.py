# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Rating thresholds and color mappings for scored buildings.

These are downstream of the engine: they only read a finished score or
status and never change it.
"""

from __future__ import annotations

from typing import Optional

from utility_reliability.data.models import Rating, Status

# ---------------------------------------------------------------------------
# Rating thresholds (score -> band)
# ---------------------------------------------------------------------------
GOOD_MIN = 75
MODERATE_MIN = 40
# Below 40 = poor, None = no data


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------

def score_to_rating(score: Optional[float]) -> Rating:
    """Convert a 0-100 score (or None) to a rating band."""
    if score is None:
        return Rating.no_data
    if score >= GOOD_MIN:
        return Rating.good
    if score >= MODERATE_MIN:
        return Rating.moderate
    return Rating.poor


def score_to_color(score: Optional[float]) -> str:
    """Convert a 0-100 score (or None) to a hex marker color."""
    return score_to_rating(score).color


def status_to_variant(status: Optional[Status | str]) -> str:
    """Badge variant for a utility's latest status.

    Returns 'stable', 'caution', 'critical', or 'neutral' when there is
    no status.
    """
    if not status:
        return "neutral"
    if status == Status.STABLE:
        return "stable"
    if status == Status.FLICKERING:
        return "caution"
    return "critical"
