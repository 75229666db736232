# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scoring configuration model and YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from utility_reliability.data.models import Status
from utility_reliability.scoring.weights import (
    FLICKERING_VALUE,
    FRESH_DAYS,
    FRESH_WEIGHT,
    OUTAGE_VALUE,
    STABLE_VALUE,
    STALE_DAYS,
    STALE_WEIGHT,
    UNKNOWN_STATUS_VALUE,
)


def _default_status_values() -> dict[Status, int]:
    return {
        Status.STABLE: STABLE_VALUE,
        Status.FLICKERING: FLICKERING_VALUE,
        Status.OUTAGE: OUTAGE_VALUE,
    }


class ScoringConfig(BaseModel):
    """Tunable parameters of the scoring engine.

    The defaults reproduce the standard 7/30-day recency bands and the
    100/50/0 status scale.
    """

    model_config = {"frozen": True}

    fresh_days: int = Field(default=FRESH_DAYS, ge=0, description="Full-weight window in days")
    stale_days: int = Field(default=STALE_DAYS, ge=0, description="Reduced-weight window in days")
    fresh_weight: float = Field(default=FRESH_WEIGHT, gt=0, le=1.0)
    stale_weight: float = Field(default=STALE_WEIGHT, ge=0, le=1.0)
    status_values: dict[Status, int] = Field(default_factory=_default_status_values)
    unknown_status: Literal["default", "strict"] = Field(
        default="default",
        description="'default' scores unknown statuses as unknown_status_value; "
                    "'strict' rejects them",
    )
    unknown_status_value: int = Field(default=UNKNOWN_STATUS_VALUE, ge=0, le=100)

    @model_validator(mode="after")
    def _check_consistency(self) -> ScoringConfig:
        if self.stale_days < self.fresh_days:
            raise ValueError(
                f"stale_days ({self.stale_days}) must not be shorter than "
                f"fresh_days ({self.fresh_days})"
            )
        missing = [s.value for s in Status if s not in self.status_values]
        if missing:
            raise ValueError(f"status_values is missing: {', '.join(missing)}")
        for status, value in self.status_values.items():
            if not 0 <= value <= 100:
                raise ValueError(f"status value for {status.value} must be within 0-100")
        return self


def load_config(path: str | Path) -> ScoringConfig:
    """Load a ScoringConfig from a YAML file."""
    import yaml

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

    if raw is not None and not isinstance(raw, dict):
        raise ValueError(f"Expected a mapping of settings in {config_path}")
    return ScoringConfig.model_validate(raw or {})
