"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from diet_tracker.api.schemas import (
    ConfirmEstimateRequest,
    DayRequest,
    FavoritePayload,
    FoodLogEntryPayload,
    ProjectionRequest,
    SaveFavoriteRequest,
    TargetsRequest,
    WeekRequest,
    WeighInEntryRequest,
)
from diet_tracker.app_logging import configure_logging
from diet_tracker.config import parse_log_level
from diet_tracker.containers import AppContainer
from diet_tracker.domain.food import FavoritedBreakdown, FoodLogEntry
from diet_tracker.domain.profiles import Weekday
from diet_tracker.domain.stats import DailyTotals, DayProgress, WeeklySummary
from diet_tracker.domain.weigh_ins import Projection, WeighIn
from diet_tracker.services.clock import InvalidTimezoneError, local_today
from diet_tracker.services.food_logs import (
    confirm_estimate,
    save_as_favorite,
    use_favorite,
)
from diet_tracker.services.projections import format_duration
from diet_tracker.services.targets import (
    calculate_ideal_weight,
    calculate_targets,
    parse_profile,
)
from diet_tracker.services.weigh_ins import InvalidWeighInError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Diet tracker API starting (environment=%s)",
            app.state.container.settings.environment,
        )
        yield
        logger.info("Diet tracker API stopped")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InvalidWeighInError)
    async def invalid_weigh_in(
        request: Request, exc: InvalidWeighInError
    ) -> JSONResponse:
        logger.info("Rejected weigh-in: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.exception_handler(InvalidTimezoneError)
    async def invalid_timezone(
        request: Request, exc: InvalidTimezoneError
    ) -> JSONResponse:
        logger.info("Rejected timezone: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/targets")
    async def targets(payload: TargetsRequest) -> dict[str, object]:
        """Return BMR, TDEE and daily targets for a profile."""
        profile = parse_profile(payload.profile)
        result = calculate_targets(profile)
        return {
            "bmr": result.bmr,
            "tdee": result.tdee,
            "calories": result.calories,
            "protein_g": result.protein_g,
            "fat_g": result.fat_g,
            "weekly_change_lbs": profile.weight_goal.weekly_change_lbs,
            "ideal_weight_lbs": calculate_ideal_weight(profile),
        }

    @app.post("/weigh-ins")
    async def weigh_in_entry(
        payload: WeighInEntryRequest, request: Request
    ) -> dict[str, object]:
        """Validate a new weigh-in before it is stored."""
        state_container: AppContainer = request.app.state.container
        weigh_in = state_container.weigh_in_service.build_weigh_in(
            payload.weight, payload.day, payload.timezone
        )
        return {"day": weigh_in.day, "weight_lbs": weigh_in.weight_lbs}

    @app.post("/weigh-ins/projection")
    async def weigh_in_projection(
        payload: ProjectionRequest, request: Request
    ) -> dict[str, object]:
        """Project progress toward the profile's target weight."""
        state_container: AppContainer = request.app.state.container
        profile = parse_profile(payload.profile)
        samples = [
            WeighIn(day=sample.day, weight_lbs=sample.weight_lbs)
            for sample in payload.weigh_ins
        ]
        projection = state_container.weigh_in_service.get_progress(
            profile, samples, today=payload.today
        )
        return _format_projection(projection)

    @app.post("/food-logs/confirm")
    async def confirm_food_log(payload: ConfirmEstimateRequest) -> dict[str, object]:
        """Turn an accepted estimate into a food log entry."""
        entry = confirm_estimate(
            payload.estimate, payload.description, payload.day, payload.user_id
        )
        return _format_entry(entry)

    @app.post("/food-logs/day")
    async def food_log_day(payload: DayRequest, request: Request) -> dict[str, object]:
        """Return the day's totals against the calorie target."""
        state_container: AppContainer = request.app.state.container
        progress = state_container.food_log_service.get_day(
            _to_entries(payload.entries), payload.day, payload.daily_target
        )
        return _format_day(progress)

    @app.post("/food-logs/week")
    async def food_log_week(
        payload: WeekRequest, request: Request
    ) -> dict[str, object]:
        """Return the weigh-day week's progress against the calorie target."""
        state_container: AppContainer = request.app.state.container
        today = payload.today or local_today(
            payload.timezone or state_container.settings.default_timezone
        )
        weigh_day = (
            Weekday(payload.weigh_day)
            if payload.weigh_day is not None
            else state_container.default_weigh_day
        )
        summary = state_container.stats_service.get_week(
            _to_entries(payload.entries),
            anchor=payload.anchor or today,
            today=today,
            weigh_day=weigh_day,
            daily_target=payload.daily_target,
        )
        return _format_week(summary)

    @app.post("/favorites")
    async def save_favorite(payload: SaveFavoriteRequest) -> dict[str, object]:
        """Keep an estimate's breakdown under a name."""
        favorite = save_as_favorite(payload.estimate, payload.name, payload.user_id)
        return {
            "name": favorite.name,
            "breakdown": [item.model_dump() for item in favorite.breakdown],
            "total_calories": favorite.total_calories,
            "user_id": favorite.user_id,
        }

    @app.post("/favorites/use")
    async def use_saved_favorite(payload: FavoritePayload) -> dict[str, object]:
        """Return a saved breakdown as an estimate ready to confirm."""
        estimate = use_favorite(
            FavoritedBreakdown(
                name=payload.name,
                breakdown=payload.breakdown,
                total_calories=payload.total_calories,
            )
        )
        return estimate.model_dump()

    return app


def _to_entries(payloads: list[FoodLogEntryPayload]) -> list[FoodLogEntry]:
    return [
        FoodLogEntry(
            day=payload.day,
            name=payload.name,
            calories=payload.calories,
            protein_g=payload.protein_g,
            carbs_g=payload.carbs_g,
            fat_g=payload.fat_g,
            description=payload.description,
            breakdown=payload.breakdown,
        )
        for payload in payloads
    ]


def _format_entry(entry: FoodLogEntry) -> dict[str, object]:
    return {
        "day": entry.day,
        "name": entry.name,
        "description": entry.description,
        "calories": entry.calories,
        "protein_g": entry.protein_g,
        "carbs_g": entry.carbs_g,
        "fat_g": entry.fat_g,
        "user_id": entry.user_id,
        "created_at": entry.created_at,
        "breakdown": [item.model_dump() for item in entry.breakdown],
    }


def _format_totals(totals: DailyTotals) -> dict[str, object]:
    return {
        "day": totals.day,
        "calories": totals.calories,
        "protein_g": totals.protein_g,
        "carbs_g": totals.carbs_g,
        "fat_g": totals.fat_g,
        "entries": totals.entries,
    }


def _format_day(progress: DayProgress) -> dict[str, object]:
    return {
        "totals": _format_totals(progress.totals),
        "target_calories": progress.target_calories,
        "remaining_calories": progress.remaining_calories,
        "percent_of_target": progress.percent_of_target,
    }


def _format_week(summary: WeeklySummary) -> dict[str, object]:
    return {
        "daily": [_format_totals(day) for day in summary.daily],
        "target_calories": summary.target_calories,
        "today_index": summary.today_index,
        "total_so_far": summary.total_so_far,
        "target_so_far": summary.target_so_far,
        "variance": summary.variance,
        "variance_percent": summary.variance_percent,
        "variance_before_today": summary.variance_before_today,
        "variance_percent_before_today": summary.variance_percent_before_today,
        "daily_average": summary.daily_average,
    }


def _format_projection(projection: Projection) -> dict[str, object]:
    return {
        "today": projection.today,
        "current_weight_lbs": projection.current_weight_lbs,
        "target_weight_lbs": projection.target_weight_lbs,
        "remaining_lbs": projection.remaining_lbs,
        "observed_daily_rate": projection.observed_daily_rate,
        "last_change_lbs": projection.last_change_lbs,
        "total_change_lbs": projection.total_change_lbs,
        "progress_percent": projection.progress_percent,
        "target_reached": projection.target_reached,
        "trajectory": _format_milestone(
            projection.trajectory_days, projection.trajectory_date
        ),
        "schedule": _format_milestone(
            projection.schedule_days, projection.schedule_date
        ),
        "schedule_delta_days": projection.schedule_delta_days,
        "base_schedule": _format_milestone(
            projection.base_schedule_days, projection.base_schedule_date
        ),
        "days_ahead_of_base": projection.days_ahead_of_base,
        "ideal_weight_lbs": projection.ideal_weight_lbs,
        "ideal_weight": _format_milestone(
            projection.ideal_weight_days, projection.ideal_weight_date
        ),
    }


def _format_milestone(days: float | None, day: date | None) -> dict[str, object]:
    return {
        "days": days,
        "date": day,
        "label": _format_date(day) if day else None,
        "duration": format_duration(days),
    }


def _format_date(day: date) -> str:
    """Format a date as e.g. "Mar 1st, 2025"."""
    return f"{day.strftime('%b')} {day.day}{_day_suffix(day.day)}, {day.year}"


def _day_suffix(day: int) -> str:
    if 11 <= day <= 13:  # noqa: PLR2004
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
