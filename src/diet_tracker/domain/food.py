"""Models for nutrition estimates and food log entries."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field


class FoodItemEstimate(BaseModel):
    """Single food component with estimated calories and macros."""

    name: str
    calories: float = Field(ge=0.0)
    protein: float = Field(default=0.0, ge=0.0)
    carbs: float = Field(default=0.0, ge=0.0)
    fat: float = Field(default=0.0, ge=0.0)


class NutritionEstimate(BaseModel):
    """Structured estimate for a described or photographed meal."""

    items: list[FoodItemEstimate]
    total_calories: float = Field(ge=0.0)
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)


@dataclass(frozen=True)
class FoodLogEntry:
    """Confirmed estimate bound to a user and a date."""

    day: date
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    description: str = ""
    id: UUID | None = None
    user_id: UUID | None = None
    created_at: datetime | None = None
    breakdown: list[FoodItemEstimate] = field(default_factory=list)


@dataclass(frozen=True)
class FavoritedBreakdown:
    """Saved breakdown that can be re-used as an estimate."""

    name: str
    breakdown: list[FoodItemEstimate]
    total_calories: float
    id: UUID | None = None
    user_id: UUID | None = None
