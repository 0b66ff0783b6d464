"""Statistics service for food logs grouped by weigh-day weeks."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from diet_tracker.domain.food import FoodLogEntry
from diet_tracker.domain.profiles import Weekday
from diet_tracker.domain.stats import DailyTotals, WeeklySummary
from diet_tracker.services.targets import round_half_up

DAYS_PER_WEEK = 7


def week_dates(anchor: date, weigh_day: Weekday = Weekday.MONDAY) -> list[date]:
    """Return the seven dates of the week containing anchor.

    The week starts on the most recent weigh day on or before anchor.
    """
    # date.weekday() is Monday-based; Weekday is Sunday-based.
    anchor_day = (anchor.weekday() + 1) % DAYS_PER_WEEK
    days_back = (anchor_day - int(weigh_day)) % DAYS_PER_WEEK
    start = anchor - timedelta(days=days_back)
    return [start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def aggregate_day(day: date, entries: Iterable[FoodLogEntry]) -> DailyTotals:
    """Sum the entries logged on a given day."""
    total = DailyTotals(day=day, calories=0, protein_g=0, carbs_g=0, fat_g=0)
    for entry in entries:
        if entry.day != day:
            continue
        total = DailyTotals(
            day=day,
            calories=total.calories + entry.calories,
            protein_g=total.protein_g + entry.protein_g,
            carbs_g=total.carbs_g + entry.carbs_g,
            fat_g=total.fat_g + entry.fat_g,
            entries=total.entries + 1,
        )
    return total


@dataclass
class StatsService:
    """Service for weekly calorie progress."""

    default_daily_target: int = 2000

    def get_week(  # noqa: PLR0913
        self,
        entries: list[FoodLogEntry],
        anchor: date,
        today: date,
        weigh_day: Weekday = Weekday.MONDAY,
        daily_target: int | None = None,
    ) -> WeeklySummary:
        """Return totals and variance for the week containing anchor.

        Only days up to and including today count toward the "so far"
        figures, so a future week has no days counted yet.
        """
        target = self.default_daily_target if daily_target is None else daily_target
        dates = week_dates(anchor, weigh_day)
        daily = [aggregate_day(day, entries) for day in dates]

        days_so_far = sum(1 for day in dates if day <= today)
        days_before_today = sum(1 for day in dates if day < today)

        total_so_far = sum(day.calories for day in daily[:days_so_far])
        target_so_far = target * days_so_far
        variance = total_so_far - target_so_far

        total_before_today = sum(day.calories for day in daily[:days_before_today])
        target_before_today = target * days_before_today
        variance_before_today = total_before_today - target_before_today

        return WeeklySummary(
            daily=daily,
            target_calories=target,
            today_index=days_so_far - 1,
            total_so_far=total_so_far,
            target_so_far=target_so_far,
            variance=variance,
            variance_percent=_percent(variance, target_so_far),
            variance_before_today=variance_before_today,
            variance_percent_before_today=_percent(
                variance_before_today, target_before_today
            ),
            daily_average=round_half_up(total_so_far / max(1, days_so_far)),
        )


def _percent(value: float, base: float) -> int:
    if base <= 0:
        return 0
    return round_half_up(value / base * 100)
