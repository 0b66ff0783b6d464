"""Tests for weigh-in projections."""

from datetime import date, timedelta

import pytest

from diet_tracker.domain.profiles import WeightGoal
from diet_tracker.domain.weigh_ins import WeighIn
from diet_tracker.services.projections import format_duration, project_weigh_ins

START = date(2025, 1, 1)


def _samples(*points: tuple[int, float]) -> list[WeighIn]:
    return [
        WeighIn(day=START + timedelta(days=offset), weight_lbs=weight)
        for offset, weight in points
    ]


def test_trajectory_from_observed_rate() -> None:
    today = START + timedelta(days=30)
    projection = project_weigh_ins(
        _samples((0, 200), (30, 190)),
        target_weight_lbs=170,
        goal=WeightGoal.LOSE,
        today=today,
    )

    assert projection.current_weight_lbs == 190
    assert projection.remaining_lbs == 20
    assert projection.observed_daily_rate == pytest.approx(1 / 3)
    assert projection.trajectory_days == pytest.approx(60)
    assert projection.trajectory_date == today + timedelta(days=60)


def test_schedule_uses_weekly_goal() -> None:
    today = START + timedelta(days=30)
    projection = project_weigh_ins(
        _samples((0, 200), (30, 190)),
        target_weight_lbs=170,
        goal=WeightGoal.LOSE,
        today=today,
    )

    assert projection.schedule_days == pytest.approx(140)
    assert projection.schedule_delta_days == pytest.approx(80)
    assert projection.progress_percent == pytest.approx(100 / 3)
    assert projection.base_schedule_days == pytest.approx(180)
    assert projection.days_ahead_of_base == pytest.approx(40)
    assert projection.last_change_lbs == -10
    assert projection.total_change_lbs == -10


def test_samples_are_sorted_by_date() -> None:
    ordered = _samples((0, 200), (10, 197), (30, 190))
    projection = project_weigh_ins(
        list(reversed(ordered)),
        target_weight_lbs=170,
        goal=WeightGoal.LOSE,
        today=START + timedelta(days=30),
    )

    assert projection.current_weight_lbs == 190
    assert projection.last_change_lbs == -7


def test_single_sample_has_no_trajectory() -> None:
    projection = project_weigh_ins(
        _samples((0, 200)),
        target_weight_lbs=170,
        goal=WeightGoal.LOSE,
        today=START,
    )

    assert projection.observed_daily_rate is None
    assert projection.trajectory_days is None
    assert projection.trajectory_date is None
    assert projection.schedule_delta_days is None
    assert projection.progress_percent is None
    assert projection.schedule_days == pytest.approx(210)


def test_no_samples_returns_empty_projection() -> None:
    projection = project_weigh_ins(
        [], target_weight_lbs=170, goal=WeightGoal.LOSE, today=START
    )

    assert projection.current_weight_lbs is None
    assert projection.remaining_lbs is None
    assert projection.trajectory_days is None
    assert projection.schedule_days is None


def test_moving_away_from_target_has_no_trajectory() -> None:
    projection = project_weigh_ins(
        _samples((0, 190), (30, 195)),
        target_weight_lbs=170,
        goal=WeightGoal.LOSE,
        today=START + timedelta(days=30),
    )

    assert projection.observed_daily_rate == pytest.approx(-1 / 6)
    assert projection.trajectory_days is None
    assert projection.schedule_delta_days is None


def test_flat_weight_has_no_trajectory() -> None:
    projection = project_weigh_ins(
        _samples((0, 190), (14, 190)),
        target_weight_lbs=170,
        goal=WeightGoal.LOSE,
        today=START + timedelta(days=14),
    )

    assert projection.observed_daily_rate == 0
    assert projection.trajectory_days is None


def test_maintain_goal_has_no_schedule() -> None:
    projection = project_weigh_ins(
        _samples((0, 200), (30, 190)),
        target_weight_lbs=170,
        goal=WeightGoal.MAINTAIN,
        today=START + timedelta(days=30),
    )

    assert projection.schedule_days is None
    assert projection.schedule_delta_days is None
    assert projection.trajectory_days == pytest.approx(60)


def test_same_day_samples_clamp_elapsed_days() -> None:
    projection = project_weigh_ins(
        [WeighIn(day=START, weight_lbs=200), WeighIn(day=START, weight_lbs=199)],
        target_weight_lbs=170,
        goal=WeightGoal.LOSE,
        today=START,
    )

    assert projection.observed_daily_rate == pytest.approx(1)


def test_gaining_toward_higher_target() -> None:
    projection = project_weigh_ins(
        _samples((0, 140), (14, 142)),
        target_weight_lbs=150,
        goal=WeightGoal.GAIN,
        today=START + timedelta(days=14),
    )

    assert projection.trajectory_days == pytest.approx(56)
    assert projection.schedule_days == pytest.approx(56)


def test_target_reached() -> None:
    projection = project_weigh_ins(
        _samples((0, 180), (30, 169)),
        target_weight_lbs=170,
        goal=WeightGoal.LOSE,
        today=START + timedelta(days=30),
    )

    assert projection.target_reached
    assert projection.trajectory_days is None


def test_ideal_weight_schedule() -> None:
    projection = project_weigh_ins(
        _samples((0, 200), (30, 190)),
        target_weight_lbs=None,
        goal=WeightGoal.LOSE,
        today=START + timedelta(days=30),
        ideal_weight_lbs=155,
    )

    assert projection.remaining_lbs is None
    assert projection.ideal_weight_days == pytest.approx(245)


@pytest.mark.parametrize(
    ("days", "expected"),
    [
        (65, "(2m 5d)"),
        (30, "(1m)"),
        (0.2, "(1d)"),
        (0, ""),
        (-4, ""),
        (None, ""),
    ],
)
def test_format_duration(days: float | None, expected: str) -> None:
    assert format_duration(days) == expected


def test_projection_past_last_representable_date_is_dropped() -> None:
    today = date(2030, 1, 1)
    projection = project_weigh_ins(
        [
            WeighIn(day=date(2020, 1, 1), weight_lbs=300.0),
            WeighIn(day=date(2029, 12, 31), weight_lbs=299.9),
        ],
        target_weight_lbs=150,
        goal=WeightGoal.LOSE,
        today=today,
    )

    assert projection.observed_daily_rate is not None
    assert projection.trajectory_days is None
    assert projection.trajectory_date is None
    assert projection.schedule_delta_days is None
    assert projection.schedule_days == pytest.approx(1049.3)
    assert projection.schedule_date == today + timedelta(days=1049)
