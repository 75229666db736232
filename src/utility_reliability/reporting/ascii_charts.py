# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Text gauges rendered with Rich markup."""

from __future__ import annotations

from typing import Optional

from utility_reliability.scoring.thresholds import score_to_rating


def score_gauge(score: Optional[float], width: int = 20) -> str:
    """Large visual gauge colored by rating band.

    Returns something like: [green]███████████████░░░░░[/] 78/100 [green]good[/]
    """
    if score is None:
        return f"[dim]{'░' * width}[/] --/100 [dim]no data[/]"

    clamped = max(0.0, min(100.0, score))
    filled = int(clamped / 100 * width)
    empty = width - filled
    rating = score_to_rating(clamped)
    color = rating.style

    bar = "█" * filled + "░" * empty
    return f"[{color}]{bar}[/] {clamped:.0f}/100 [{color}]{rating.value}[/]"


def mini_gauge(score: Optional[float], width: int = 10) -> str:
    """Compact gauge for inline use in tables."""
    if score is None:
        return f"[dim]{'░' * width} --[/]"

    clamped = max(0.0, min(100.0, score))
    filled = int(clamped / 100 * width)
    empty = width - filled
    color = score_to_rating(clamped).style

    bar = "█" * filled + "░" * empty
    return f"[{color}]{bar}[/] {clamped:.0f}"
