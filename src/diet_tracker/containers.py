"""Dependency container wiring for the application."""

from dataclasses import dataclass

from diet_tracker.config import Settings
from diet_tracker.domain.profiles import Weekday
from diet_tracker.services.food_logs import FoodLogService
from diet_tracker.services.stats import StatsService
from diet_tracker.services.weigh_ins import WeighInService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    weigh_in_service: WeighInService
    food_log_service: FoodLogService
    stats_service: StatsService
    default_weigh_day: Weekday


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    daily_target = resolved_settings.default_daily_calorie_target
    weigh_in_service = WeighInService(
        default_timezone=resolved_settings.default_timezone
    )
    food_log_service = FoodLogService(default_daily_target=daily_target)
    stats_service = StatsService(default_daily_target=daily_target)

    return AppContainer(
        settings=resolved_settings,
        weigh_in_service=weigh_in_service,
        food_log_service=food_log_service,
        stats_service=stats_service,
        default_weigh_day=Weekday(resolved_settings.default_weigh_day),
    )
