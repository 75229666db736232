"""Property checks for the scoring engine over randomly generated report sets."""

from __future__ import annotations

import random
from datetime import timedelta

import pytest

from utility_reliability.data.models import Report, Status, UtilityType
from utility_reliability.scoring.engine import ScoreEngine

SEEDS = list(range(40))


def _random_reports(rng: random.Random, report, max_reports: int = 25) -> list[Report]:
    reports = []
    for i in range(rng.randint(0, max_reports)):
        reports.append(report(
            rng.choice(list(UtilityType)),
            rng.choice(list(Status)),
            days_ago=rng.uniform(-3, 60),
            report_id=f"r{i:03d}" if rng.random() < 0.7 else None,
        ))
    return reports


@pytest.fixture(scope="module")
def engine() -> ScoreEngine:
    return ScoreEngine()


@pytest.mark.parametrize("seed", SEEDS)
def test_scores_within_range(engine, report, now, seed):
    result = engine.score_building(_random_reports(random.Random(seed), report), now)
    scores = [u.score for u in result.utilities.values()] + [result.composite]
    for score in scores:
        assert score is None or (isinstance(score, int) and 0 <= score <= 100)


@pytest.mark.parametrize("seed", SEEDS)
def test_has_data_matches_composite(engine, report, now, seed):
    result = engine.score_building(_random_reports(random.Random(seed), report), now)
    assert result.has_data == (result.composite is not None)


@pytest.mark.parametrize("seed", SEEDS)
def test_composite_is_mean_of_present_scores(engine, report, now, seed):
    result = engine.score_building(_random_reports(random.Random(seed), report), now)
    present = [u.score for u in result.utilities.values() if u.score is not None]
    if not present:
        assert result.composite is None
    else:
        assert abs(result.composite - sum(present) / len(present)) <= 0.5


@pytest.mark.parametrize("seed", SEEDS)
def test_single_utility_composite_equals_its_score(engine, report, now, seed):
    rng = random.Random(seed)
    reports = [r for r in _random_reports(rng, report) if r.utility_type == UtilityType.POWER]
    reports.append(report(UtilityType.POWER, rng.choice(list(Status)), 1))
    result = engine.score_building(reports, now)
    assert result.composite == result.utilities[UtilityType.POWER].score


@pytest.mark.parametrize("seed", SEEDS)
def test_idempotent_and_order_independent(engine, report, now, seed):
    rng = random.Random(seed)
    reports = _random_reports(rng, report)
    # Unique timestamps keep the latest report unambiguous
    reports = [
        r.model_copy(update={"created_at": r.created_at + timedelta(microseconds=i)})
        for i, r in enumerate(reports)
    ]
    first = engine.score_building(reports, now)
    assert engine.score_building(reports, now) == first

    shuffled = list(reports)
    rng.shuffle(shuffled)
    assert engine.score_building(shuffled, now) == first


@pytest.mark.parametrize("seed", SEEDS)
def test_single_expired_report_keeps_status(engine, report, now, seed):
    rng = random.Random(seed)
    utility = rng.choice(list(UtilityType))
    status = rng.choice(list(Status))
    expired = report(utility, status, days_ago=rng.uniform(31, 400))
    result = engine.score_utility([expired], utility, now)
    assert result.score is None
    assert result.status == status
    assert result.last_report_at == expired.created_at
