# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Utility Reliability - crowdsourced utility-status scoring for buildings."""

__version__ = "0.1.0"

from utility_reliability.config import ScoringConfig, load_config
from utility_reliability.data.models import (
    Building,
    BuildingListing,
    BuildingScore,
    Pagination,
    Rating,
    Report,
    Status,
    UtilityScore,
    UtilityType,
)
from utility_reliability.errors import ReportValidationError
from utility_reliability.scoring.engine import ScoreEngine
from utility_reliability.scoring.ranking import build_listing, paginate, rank_buildings

__all__ = [
    "Building",
    "BuildingListing",
    "BuildingScore",
    "Pagination",
    "Rating",
    "Report",
    "ReportValidationError",
    "ScoreEngine",
    "ScoringConfig",
    "Status",
    "UtilityScore",
    "UtilityType",
    "build_listing",
    "load_config",
    "paginate",
    "rank_buildings",
]
