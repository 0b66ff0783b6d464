"""Domain models for food log statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Daily total calories and macros."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    entries: int = 0


@dataclass(frozen=True)
class DayProgress:
    """Daily totals measured against the calorie target."""

    totals: DailyTotals
    target_calories: int
    remaining_calories: float
    percent_of_target: float


@dataclass(frozen=True)
class WeeklySummary:
    """Calorie progress for a week starting on the weigh day."""

    daily: list[DailyTotals]
    target_calories: int
    today_index: int
    total_so_far: float
    target_so_far: int
    variance: float
    variance_percent: int
    variance_before_today: float
    variance_percent_before_today: int
    daily_average: int
