"""Food log confirmation and daily progress."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from diet_tracker.domain.food import (
    FavoritedBreakdown,
    FoodLogEntry,
    NutritionEstimate,
)
from diet_tracker.domain.stats import DayProgress
from diet_tracker.services.stats import aggregate_day


def confirm_estimate(
    estimate: NutritionEstimate,
    description: str,
    day: date,
    user_id: UUID | None = None,
) -> FoodLogEntry:
    """Turn an estimate into a log entry for the given day."""
    name = description.strip() or ", ".join(item.name for item in estimate.items)
    return FoodLogEntry(
        day=day,
        name=name,
        calories=estimate.total_calories,
        protein_g=sum(item.protein for item in estimate.items),
        carbs_g=sum(item.carbs for item in estimate.items),
        fat_g=sum(item.fat for item in estimate.items),
        description=description,
        user_id=user_id,
        created_at=datetime.now(tz=UTC),
        breakdown=list(estimate.items),
    )


def save_as_favorite(
    estimate: NutritionEstimate, name: str, user_id: UUID | None = None
) -> FavoritedBreakdown:
    """Capture an estimate's breakdown under a name for re-use."""
    return FavoritedBreakdown(
        name=name.strip(),
        breakdown=list(estimate.items),
        total_calories=estimate.total_calories,
        user_id=user_id,
    )


def use_favorite(favorite: FavoritedBreakdown) -> NutritionEstimate:
    """Return a saved breakdown as a fully confident estimate."""
    return NutritionEstimate(
        items=favorite.breakdown,
        total_calories=favorite.total_calories,
        confidence=1.0,
    )


@dataclass
class FoodLogService:
    """Service for daily totals measured against the calorie target."""

    default_daily_target: int = 2000

    def get_day(
        self,
        entries: list[FoodLogEntry],
        day: date,
        daily_target: int | None = None,
    ) -> DayProgress:
        """Return the day's totals, recomputed from its entries."""
        target = self.default_daily_target if daily_target is None else daily_target
        totals = aggregate_day(day, entries)
        percent = min(100.0, totals.calories / target * 100) if target > 0 else 0.0
        return DayProgress(
            totals=totals,
            target_calories=target,
            remaining_calories=target - totals.calories,
            percent_of_target=percent,
        )
