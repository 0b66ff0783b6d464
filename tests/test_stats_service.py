"""Tests for stats service."""

from datetime import date, timedelta

from diet_tracker.domain.profiles import Weekday
from diet_tracker.services.stats import StatsService, aggregate_day, week_dates
from tests.conftest import make_entry

# Wednesday
ANCHOR = date(2025, 1, 15)


def test_week_dates_start_on_weigh_day() -> None:
    monday_week = week_dates(ANCHOR, Weekday.MONDAY)
    sunday_week = week_dates(ANCHOR, Weekday.SUNDAY)
    thursday_week = week_dates(ANCHOR, Weekday.THURSDAY)

    assert monday_week[0] == date(2025, 1, 13)
    assert monday_week[-1] == date(2025, 1, 19)
    assert sunday_week[0] == date(2025, 1, 12)
    assert thursday_week[0] == date(2025, 1, 9)
    assert week_dates(date(2025, 1, 13), Weekday.MONDAY) == monday_week


def test_aggregate_day_counts_entries() -> None:
    day = date(2025, 1, 13)
    totals = aggregate_day(
        day,
        [make_entry(day, 400, fat_g=5), make_entry(day, 100, fat_g=2)],
    )

    assert totals.calories == 500
    assert totals.fat_g == 7
    assert totals.entries == 2


def test_get_week_so_far() -> None:
    entries = [
        make_entry(date(2025, 1, 13), 1800),
        make_entry(date(2025, 1, 14), 1000),
        make_entry(date(2025, 1, 14), 1100),
        make_entry(date(2025, 1, 15), 500),
        make_entry(date(2025, 1, 16), 3000),
    ]

    summary = StatsService().get_week(
        entries, anchor=ANCHOR, today=ANCHOR, daily_target=2000
    )

    assert [day.calories for day in summary.daily] == [1800, 2100, 500, 3000, 0, 0, 0]
    assert summary.today_index == 2
    assert summary.total_so_far == 4400
    assert summary.target_so_far == 6000
    assert summary.variance == -1600
    assert summary.variance_percent == -27
    assert summary.variance_before_today == -100
    assert summary.variance_percent_before_today == -2
    assert summary.daily_average == 1467


def test_get_week_first_day_has_no_prior_variance() -> None:
    monday = date(2025, 1, 13)
    summary = StatsService().get_week(
        [make_entry(monday, 2500)], anchor=monday, today=monday
    )

    assert summary.today_index == 0
    assert summary.target_calories == 2000
    assert summary.variance == 500
    assert summary.variance_percent == 25
    assert summary.variance_before_today == 0
    assert summary.variance_percent_before_today == 0


def test_get_week_in_the_past_counts_all_days() -> None:
    entries = [
        make_entry(date(2025, 1, 13) + timedelta(days=offset), 2100)
        for offset in range(7)
    ]

    summary = StatsService().get_week(
        entries, anchor=ANCHOR, today=date(2025, 2, 1), daily_target=2000
    )

    assert summary.today_index == 6
    assert summary.total_so_far == 14700
    assert summary.target_so_far == 14000
    assert summary.variance == 700
    assert summary.variance_percent == 5
    assert summary.daily_average == 2100


def test_get_week_in_the_future_counts_nothing() -> None:
    summary = StatsService().get_week(
        [make_entry(ANCHOR, 900)], anchor=ANCHOR, today=date(2025, 1, 1)
    )

    assert summary.today_index == -1
    assert summary.total_so_far == 0
    assert summary.target_so_far == 0
    assert summary.variance_percent == 0
    assert summary.daily_average == 0


def test_get_week_keeps_explicit_zero_target() -> None:
    summary = StatsService().get_week(
        [make_entry(ANCHOR, 900)], anchor=ANCHOR, today=ANCHOR, daily_target=0
    )

    assert summary.target_calories == 0
    assert summary.target_so_far == 0
    assert summary.variance == 900
    assert summary.variance_percent == 0
