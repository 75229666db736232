# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for utility reliability scoring.

Reports are the crowdsourced input; ``UtilityScore`` and ``BuildingScore``
are the engine's output.  Output models serialize with camelCase aliases so
that the JSON they produce matches what the map and listing views consume.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class UtilityType(str, Enum):
    """Infrastructure service tracked per building."""

    POWER = "POWER"
    WATER = "WATER"
    INTERNET = "INTERNET"


class Status(str, Enum):
    """Observed state of a utility at the time of a report."""

    STABLE = "STABLE"
    FLICKERING = "FLICKERING"
    OUTAGE = "OUTAGE"


class Rating(str, Enum):
    """Reliability band used to color markers and listing badges."""

    good = "good"
    moderate = "moderate"
    poor = "poor"
    no_data = "no_data"

    @property
    def color(self) -> str:
        """Hex marker color associated with this rating."""
        return {
            Rating.good: "#10b981",
            Rating.moderate: "#f59e0b",
            Rating.poor: "#ef4444",
            Rating.no_data: "#9ca3af",
        }[self]

    @property
    def style(self) -> str:
        """Rich style name for terminal output."""
        return {
            Rating.good: "green",
            Rating.moderate: "yellow",
            Rating.poor: "red",
            Rating.no_data: "dim",
        }[self]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _coerce_status(value: object) -> object:
    """Map known status strings onto ``Status``; keep anything else raw."""
    if isinstance(value, str) and not isinstance(value, Enum):
        value = value.strip().upper()
        try:
            return Status(value)
        except ValueError:
            return value
    return value


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------

class Report(BaseModel):
    """A single crowdsourced observation of a utility's status."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    utility_type: UtilityType = Field(..., description="Utility being reported on")
    status: Union[Status, str] = Field(
        ...,
        description="Reported status; unrecognised values are kept as raw strings",
    )
    created_at: datetime = Field(..., description="When the report was submitted")
    id: Optional[str] = Field(default=None, description="Report identifier")

    @field_validator("utility_type", mode="before")
    @classmethod
    def _normalise_utility(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, Enum):
            return value.strip().upper()
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _normalise_status(cls, value: object) -> object:
        return _coerce_status(value)

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value


class Building(BaseModel):
    """A building together with the reports filed against it."""

    model_config = {"frozen": False, "populate_by_name": True, "alias_generator": to_camel}

    id: str = Field(..., description="Unique building identifier")
    name: str = Field(..., description="Human-readable building name")
    neighbourhood: str = Field(default="", description="Neighbourhood the building is in")
    city: str = Field(default="Nairobi")
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    suspicious: bool = Field(
        default=False, description="Flagged by moderation as having suspicious reports"
    )
    reports: list[Report] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Output models
# ---------------------------------------------------------------------------

class UtilityScore(BaseModel):
    """Score and latest status for one utility of one building."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    score: Optional[int] = Field(default=None, ge=0, le=100)
    status: Optional[Union[Status, str]] = Field(default=None)
    last_report_at: Optional[datetime] = Field(default=None)

    @field_validator("status", mode="before")
    @classmethod
    def _normalise_status(cls, value: object) -> object:
        return _coerce_status(value)


class BuildingScore(BaseModel):
    """Composite reliability score for a building."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    composite: Optional[int] = Field(default=None, ge=0, le=100)
    utilities: dict[UtilityType, UtilityScore] = Field(
        default_factory=lambda: {u: UtilityScore() for u in UtilityType}
    )

    @field_validator("utilities")
    @classmethod
    def _all_utilities_present(
        cls, value: dict[UtilityType, UtilityScore]
    ) -> dict[UtilityType, UtilityScore]:
        return {u: value.get(u, UtilityScore()) for u in UtilityType}

    @computed_field(alias="hasData")  # type: ignore[prop-decorator]
    @property
    def has_data(self) -> bool:
        """True when at least one utility produced a score."""
        return self.composite is not None


class BuildingListing(BaseModel):
    """A scored building as shown on the map and in ranked listings."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    id: str
    name: str
    neighbourhood: str = ""
    city: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    suspicious: bool = False
    score: Optional[int] = Field(default=None, ge=0, le=100)
    utility_scores: dict[UtilityType, UtilityScore] = Field(default_factory=dict)
    has_data: bool = False
    report_count: int = Field(default=0, ge=0)
    rating: Rating = Rating.no_data

    @computed_field(alias="markerColor")  # type: ignore[prop-decorator]
    @property
    def marker_color(self) -> str:
        """Hex color for the building's map marker."""
        return self.rating.color


class Pagination(BaseModel):
    """Page metadata for a paged listing."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
