# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models and file loaders for utility reports."""

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
from utility_reliability.data.loader import load_buildings, load_reports

__all__ = [
    "Building",
    "BuildingListing",
    "BuildingScore",
    "Pagination",
    "Rating",
    "Report",
    "Status",
    "UtilityScore",
    "UtilityType",
    "load_buildings",
    "load_reports",
]
