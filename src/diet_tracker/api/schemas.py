"""Pydantic models for API request payloads."""

from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from diet_tracker.domain.food import FoodItemEstimate, NutritionEstimate


class WeighInPayload(BaseModel):
    """Dated weigh-in as stored by the client."""

    day: date
    weight_lbs: float


class FoodLogEntryPayload(BaseModel):
    """Food log entry as stored by the client."""

    day: date
    name: str
    calories: float = Field(ge=0.0)
    protein_g: float = Field(default=0.0, ge=0.0)
    carbs_g: float = Field(default=0.0, ge=0.0)
    fat_g: float = Field(default=0.0, ge=0.0)
    description: str = ""
    breakdown: list[FoodItemEstimate] = Field(default_factory=list)


class TargetsRequest(BaseModel):
    """Profile fields for a target calculation.

    The profile is loosely typed so stored legacy values still parse.
    """

    profile: dict[str, Any] = Field(default_factory=dict)


class ProjectionRequest(BaseModel):
    """Profile and weigh-in history for a projection."""

    profile: dict[str, Any] = Field(default_factory=dict)
    weigh_ins: list[WeighInPayload] = Field(default_factory=list)
    today: date | None = None


class WeighInEntryRequest(BaseModel):
    """New weigh-in entered by the user."""

    weight: float | str
    day: date
    timezone: str | None = None


class ConfirmEstimateRequest(BaseModel):
    """Estimate the user accepted for logging."""

    estimate: NutritionEstimate
    description: str = ""
    day: date
    user_id: UUID | None = None


class DayRequest(BaseModel):
    """Entries and target for a single day."""

    entries: list[FoodLogEntryPayload] = Field(default_factory=list)
    day: date
    daily_target: int | None = Field(default=None, gt=0)


class WeekRequest(BaseModel):
    """Entries and target for a weigh-day week."""

    entries: list[FoodLogEntryPayload] = Field(default_factory=list)
    anchor: date | None = None
    today: date | None = None
    weigh_day: int | None = Field(default=None, ge=0, le=6)
    daily_target: int | None = Field(default=None, gt=0)
    timezone: str | None = None


class SaveFavoriteRequest(BaseModel):
    """Estimate to keep under a name."""

    name: str = Field(min_length=1)
    estimate: NutritionEstimate
    user_id: UUID | None = None


class FavoritePayload(BaseModel):
    """Saved breakdown to re-use as an estimate."""

    name: str
    breakdown: list[FoodItemEstimate]
    total_calories: float = Field(ge=0.0)
