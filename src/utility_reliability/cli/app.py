# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for utility-score."""

from __future__ import annotations

import json
import logging
import math
from datetime import datetime
from typing import Optional

import click
from rich.console import Console

from utility_reliability import __version__
from utility_reliability.config import ScoringConfig, load_config
from utility_reliability.data.loader import load_buildings, load_reports
from utility_reliability.reporting.terminal import TerminalRenderer
from utility_reliability.scoring.engine import ScoreEngine
from utility_reliability.scoring.ranking import paginate, rank_buildings
from utility_reliability.scoring.thresholds import score_to_rating

logger = logging.getLogger(__name__)

_INPUT_ERRORS = (FileNotFoundError, ValueError)


class _ISODateTime(click.ParamType):
    """ISO-8601 timestamp option, e.g. 2025-03-01T12:00:00Z."""

    name = "datetime"

    def convert(self, value, param, ctx):
        if isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            self.fail(f"{value!r} is not an ISO-8601 timestamp", param, ctx)


ISO_DATETIME = _ISODateTime()


def _engine(config_path: Optional[str]) -> ScoreEngine:
    config = load_config(config_path) if config_path else ScoringConfig()
    return ScoreEngine(config)


def _fail(console: Console, exc: Exception) -> None:
    logger.debug("Command failed", exc_info=exc)
    console.print(f"[red]{exc}[/]")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """utility-score: crowdsourced utility reliability scoring

    Score buildings from power, water, and internet status reports.

    \b
      Reports from the last 7 days count in full,
      8-30 days at half weight, older reports are not scored.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(no_color=no_color)


@cli.command()
@click.argument("reports_file", type=click.Path())
@click.option("--now", type=ISO_DATETIME, default=None, help="Reference time (default: now)")
@click.option("--config", "-c", type=click.Path(), default=None, help="Scoring config YAML file")
@click.option("--title", "-t", default="Building", help="Title shown above the scores")
@click.option("--json", "as_json", is_flag=True, help="Print raw results as JSON")
@click.pass_context
def score(
    ctx: click.Context,
    reports_file: str,
    now: Optional[datetime],
    config: Optional[str],
    title: str,
    as_json: bool,
) -> None:
    """Score one building from a CSV or JSON file of its reports."""
    console: Console = ctx.obj["console"]

    try:
        engine = _engine(config)
        reports = load_reports(reports_file)
        result = engine.score_building(reports, now)
    except _INPUT_ERRORS as exc:
        _fail(console, exc)

    if as_json:
        click.echo(result.model_dump_json(by_alias=True, indent=2))
        return

    TerminalRenderer(console).render_building(result, title=title)


@cli.command()
@click.argument("buildings_file", type=click.Path())
@click.option("--now", type=ISO_DATETIME, default=None, help="Reference time (default: now)")
@click.option("--config", "-c", type=click.Path(), default=None, help="Scoring config YAML file")
@click.option("--neighbourhood", "-n", default=None, help="Only buildings in this neighbourhood")
@click.option("--query", "-q", default=None, help="Only buildings whose name contains this text")
@click.option(
    "--limit", "-l", type=click.IntRange(min=1), default=None,
    help="Buildings per page (default: show all)",
)
@click.option("--page", "-p", type=click.IntRange(min=1), default=1, help="Page to show with --limit")
@click.option("--json", "as_json", is_flag=True, help="Print raw results as JSON")
@click.pass_context
def rank(
    ctx: click.Context,
    buildings_file: str,
    now: Optional[datetime],
    config: Optional[str],
    neighbourhood: Optional[str],
    query: Optional[str],
    limit: Optional[int],
    page: int,
    as_json: bool,
) -> None:
    """Rank buildings from a JSON file, most reliable first."""
    console: Console = ctx.obj["console"]

    try:
        engine = _engine(config)
        buildings = load_buildings(buildings_file)
        listings = rank_buildings(
            buildings, engine, now, neighbourhood=neighbourhood, query=query
        )
    except _INPUT_ERRORS as exc:
        _fail(console, exc)

    pagination = None
    if limit is not None:
        listings, pagination = paginate(listings, page=page, limit=limit)

    if as_json:
        payload = {"buildings": [item.model_dump(mode="json", by_alias=True) for item in listings]}
        if pagination is not None:
            payload["pagination"] = pagination.model_dump(by_alias=True)
        click.echo(json.dumps(payload, indent=2))
        return

    if not listings:
        console.print("[yellow]No buildings matched.[/]")
        return
    start = 1 if pagination is None else (page - 1) * limit + 1
    TerminalRenderer(console).render_ranking(listings, start=start)
    if pagination is not None:
        console.print(
            f"\n  [dim]Page {pagination.page} of {pagination.total_pages} "
            f"({pagination.total} buildings)[/dim]"
        )


@cli.command()
@click.argument("value")
@click.pass_context
def color(ctx: click.Context, value: str) -> None:
    """Show the rating and marker color for a score (or 'none')."""
    console: Console = ctx.obj["console"]

    if value.lower() in ("none", "null", "-"):
        score_value = None
    else:
        try:
            score_value = float(value)
        except ValueError:
            score_value = math.nan
        if not math.isfinite(score_value) or not 0 <= score_value <= 100:
            console.print(f"[red]Not a score between 0 and 100: {value}[/]")
            raise SystemExit(1)

    rating = score_to_rating(score_value)
    click.echo(f"{rating.value} {rating.color}")


if __name__ == "__main__":
    cli()
