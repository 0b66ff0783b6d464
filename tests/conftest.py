"""Shared test fixtures."""

from datetime import date

import pytest

from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer, build_container
from diet_tracker.domain.food import FoodItemEstimate, FoodLogEntry, NutritionEstimate
from diet_tracker.domain.profiles import (
    ActivityLevel,
    Profile,
    Sex,
    WeightGoal,
)

REFERENCE_PROFILE = {
    "age": 25,
    "sex": "male",
    "weight_lbs": 154,
    "height_ft": 5,
    "height_in": 10,
    "activity_level": "sedentary",
    "weight_goal": "maintain",
}


def make_profile(**overrides: object) -> Profile:
    """Build the reference profile with selected fields replaced."""
    fields: dict[str, object] = {
        "age": 25,
        "sex": Sex.MALE,
        "weight_lbs": 154.0,
        "height_ft": 5,
        "height_in": 10,
        "activity_level": ActivityLevel.SEDENTARY,
        "weight_goal": WeightGoal.MAINTAIN,
    }
    fields.update(overrides)
    return Profile(**fields)  # type: ignore[arg-type]


def make_entry(day: date, calories: float, **overrides: object) -> FoodLogEntry:
    """Build a food log entry for a day."""
    fields: dict[str, object] = {
        "day": day,
        "name": "meal",
        "calories": calories,
        "protein_g": 0.0,
        "carbs_g": 0.0,
        "fat_g": 0.0,
    }
    fields.update(overrides)
    return FoodLogEntry(**fields)  # type: ignore[arg-type]


def chicken_and_rice() -> NutritionEstimate:
    return NutritionEstimate(
        items=[
            FoodItemEstimate(name="chicken", calories=300, protein=30, fat=10),
            FoodItemEstimate(name="rice", calories=200, protein=4, carbs=45, fat=1),
        ],
        total_calories=500,
        confidence=0.8,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        default_timezone="UTC",
        default_daily_calorie_target=2000,
        default_weigh_day=1,
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
