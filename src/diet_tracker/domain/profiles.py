"""Domain models for user profiles and calorie targets."""

from dataclasses import dataclass
from enum import Enum, IntEnum

CALORIES_PER_LB = 3500


class Sex(Enum):
    """Biological sex, used only to select the BMR offset."""

    MALE = "male"
    FEMALE = "female"

    @property
    def bmr_offset(self) -> int:
        """Return the Mifflin-St Jeor constant for this sex."""
        return 5 if self is Sex.MALE else -161


@dataclass(frozen=True)
class ActivityOption:
    """Activity level definition."""

    key: str
    multiplier: float
    label: str


@dataclass(frozen=True)
class GoalOption:
    """Weight goal definition."""

    key: str
    calorie_delta: int
    label: str


class ActivityLevel(Enum):
    """Activity levels with their TDEE multipliers."""

    SEDENTARY = ActivityOption(
        "sedentary", 1.2, "Sedentary (Office job, little exercise)"
    )
    LIGHT = ActivityOption("light", 1.375, "Light (Exercise 1-3 days/week)")
    MODERATE = ActivityOption("moderate", 1.55, "Moderate (Exercise 3-5 days/week)")
    ACTIVE = ActivityOption("active", 1.725, "Active (Exercise 6-7 days/week)")
    VERY_ACTIVE = ActivityOption(
        "very_active", 1.9, "Very Active (Hard exercise & physical job)"
    )

    @property
    def multiplier(self) -> float:
        """Return the TDEE multiplier."""
        return self.value.multiplier


class WeightGoal(Enum):
    """Weekly weight-change goals with their daily calorie delta."""

    LOSE_FAST = GoalOption("lose_fast", -1000, "Lose 2 lbs/week (-1000 kcal)")
    LOSE = GoalOption("lose", -500, "Lose 1 lb/week (-500 kcal)")
    MAINTAIN = GoalOption("maintain", 0, "Maintain Weight")
    GAIN = GoalOption("gain", 500, "Gain 1 lb/week (+500 kcal)")
    GAIN_FAST = GoalOption("gain_fast", 1000, "Gain 2 lbs/week (+1000 kcal)")

    @property
    def calorie_delta(self) -> int:
        """Return the daily calorie offset applied to TDEE."""
        return self.value.calorie_delta

    @property
    def weekly_change_lbs(self) -> float:
        """Return the expected lb/week change (negative when losing)."""
        return self.calorie_delta * 7 / CALORIES_PER_LB

    @property
    def weekly_loss_lbs(self) -> float:
        """Return the expected lb/week loss (negative when gaining)."""
        return -self.weekly_change_lbs

    @classmethod
    def from_weekly_change(cls, lbs_per_week: float) -> "WeightGoal":
        """Return the goal whose weekly change matches the given figure."""
        for goal in cls:
            if abs(goal.weekly_change_lbs - lbs_per_week) < 1e-9:  # noqa: PLR2004
                return goal
        raise ValueError(f"No weight goal for {lbs_per_week} lb/week")


class Weekday(IntEnum):
    """Day of the week in the stored convention (Sunday is zero)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


@dataclass(frozen=True)
class Profile:
    """Physical profile fields used for target calculation."""

    age: int
    sex: Sex
    weight_lbs: float
    height_ft: int
    height_in: int
    activity_level: ActivityLevel
    weight_goal: WeightGoal
    target_weight_lbs: float | None = None
    weigh_day: Weekday = Weekday.MONDAY
    timezone: str | None = None
    daily_calorie_target: int | None = None

    @property
    def height_total_in(self) -> int:
        """Return the total height in inches."""
        return self.height_ft * 12 + self.height_in


@dataclass(frozen=True)
class DailyTargets:
    """Calculated daily energy and macro targets."""

    bmr: float
    tdee: float
    calories: int
    protein_g: int
    fat_g: int
