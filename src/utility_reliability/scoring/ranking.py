# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Building listings: score, filter, and rank many buildings at once."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable, Optional

from utility_reliability.data.models import Building, BuildingListing, Pagination
from utility_reliability.scoring.engine import ScoreEngine, resolve_now
from utility_reliability.scoring.thresholds import score_to_rating


def build_listing(
    building: Building,
    engine: ScoreEngine | None = None,
    now: Optional[datetime] = None,
) -> BuildingListing:
    """Score *building* and package it for the map or a listing.

    ``report_count`` counts only the reports recent enough to carry weight.
    """
    engine = engine or ScoreEngine()
    now = resolve_now(now)
    result = engine.score_building(building.reports, now)
    return BuildingListing(
        id=building.id,
        name=building.name,
        neighbourhood=building.neighbourhood,
        city=building.city,
        latitude=building.latitude,
        longitude=building.longitude,
        suspicious=building.suspicious,
        score=result.composite,
        utility_scores=result.utilities,
        has_data=result.has_data,
        report_count=len(engine.recent_reports(building.reports, now)),
        rating=score_to_rating(result.composite),
    )


def _rank_key(listing: BuildingListing) -> tuple[bool, int, str, str]:
    # No-data buildings sink to the bottom; higher scores first.
    return (
        listing.score is None,
        -(listing.score or 0),
        listing.name.casefold(),
        listing.id,
    )


def rank_buildings(
    buildings: Iterable[Building],
    engine: ScoreEngine | None = None,
    now: Optional[datetime] = None,
    neighbourhood: Optional[str] = None,
    query: Optional[str] = None,
) -> list[BuildingListing]:
    """Score, filter, and sort buildings best-first.

    Args:
        buildings: Buildings with their reports attached.
        engine: Engine to score with; a default engine if omitted.
        now: Reference time shared by every building.
        neighbourhood: Keep only buildings in this neighbourhood.
        query: Keep only buildings whose name contains this text
            (case-insensitive).

    Returns:
        Listings ordered by composite score descending, buildings without
        data last, ties broken by name and then id.
    """
    engine = engine or ScoreEngine()
    now = resolve_now(now)

    selected = list(buildings)
    if query:
        needle = query.casefold()
        selected = [b for b in selected if needle in b.name.casefold()]
    if neighbourhood:
        selected = [b for b in selected if b.neighbourhood == neighbourhood]

    listings = [build_listing(b, engine, now) for b in selected]
    return sorted(listings, key=_rank_key)


def paginate(
    listings: list[BuildingListing],
    page: int = 1,
    limit: int = 20,
) -> tuple[list[BuildingListing], Pagination]:
    """Slice ranked *listings* into one page.

    Pages are numbered from 1; a page past the end is empty.
    """
    if page < 1:
        raise ValueError(f"page must be at least 1, got {page}")
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    total = len(listings)
    start = (page - 1) * limit
    return listings[start:start + limit], Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )
