# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""CSV and JSON import of reports and buildings.

Accepts the camelCase field names used by the reporting API as well as
snake_case equivalents.  Uses only stdlib for reading; rows are validated
by the pydantic models.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

from utility_reliability.data.models import Building, Report

logger = logging.getLogger(__name__)

# Accepted CSV headers (lower-cased) for each report field
_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "utility_type": ("utilitytype", "utility_type", "utility"),
    "status": ("status",),
    "created_at": ("createdat", "created_at", "timestamp"),
    "id": ("id", "report_id"),
}


def load_reports(path: str | Path) -> list[Report]:
    """Read the reports for a single building from a CSV or JSON file."""
    file_path = _existing(path)
    suffix = file_path.suffix.lower()
    if suffix == ".csv":
        reports = _read_reports_csv(file_path)
    elif suffix == ".json":
        data = _read_json_list(file_path, "reports")
        reports = [Report.model_validate(item) for item in data]
    else:
        raise ValueError(f"Unsupported file type: {file_path.suffix}")

    logger.debug("Read %d reports from %s", len(reports), file_path)
    return reports


def load_buildings(path: str | Path) -> list[Building]:
    """Read buildings, each with nested reports, from a JSON file."""
    file_path = _existing(path)
    if file_path.suffix.lower() != ".json":
        raise ValueError(f"Unsupported file type: {file_path.suffix}")

    data = _read_json_list(file_path, "buildings")
    buildings = [Building.model_validate(item) for item in data]

    logger.debug("Read %d buildings from %s", len(buildings), file_path)
    return buildings


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _existing(path: str | Path) -> Path:
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    return file_path


def _read_json_list(path: Path, key: str) -> list[Any]:
    """Load a JSON list, either bare or wrapped as ``{key: [...]}``."""
    with open(path, encoding="utf-8-sig") as f:
        data = json.load(f)

    if isinstance(data, dict):
        if key not in data:
            raise ValueError(f"Expected a '{key}' key in {path}")
        data = data[key]
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of {key} in {path}")
    return data


def _read_reports_csv(path: Path) -> list[Report]:
    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames:
            return []

        fields_lower = {fn.strip().lower(): fn for fn in reader.fieldnames}
        columns = {
            field: next((fields_lower[a] for a in aliases if a in fields_lower), None)
            for field, aliases in _COLUMN_ALIASES.items()
        }

        reports = []
        for row in reader:
            values = {
                field: row[column]
                for field, column in columns.items()
                if column is not None and row.get(column)
            }
            reports.append(Report.model_validate(values))
        return reports
