"""Calorie and macro target calculation (Mifflin-St Jeor)."""

import logging
import math
from collections.abc import Mapping

from diet_tracker.domain.profiles import (
    ActivityLevel,
    DailyTargets,
    Profile,
    Sex,
    Weekday,
    WeightGoal,
)

KG_PER_LB = 0.453592
CM_PER_IN = 2.54
LBS_PER_KG = 2.20462
PROTEIN_LBS_PER_KG = 2.205
PROTEIN_G_PER_KG = 1.2
FAT_G_PER_LB = 0.275
INCHES_IN_FIVE_FEET = 60

DEFAULT_AGE = 25
DEFAULT_WEIGHT_LBS = 150.0
DEFAULT_HEIGHT_FT = 5
DEFAULT_HEIGHT_IN = 10
DEFAULT_SEX = Sex.MALE
DEFAULT_ACTIVITY = ActivityLevel.SEDENTARY
DEFAULT_GOAL = WeightGoal.MAINTAIN
DEFAULT_WEIGH_DAY = Weekday.MONDAY

# Words stored before activity and goal values were normalised to numbers.
_LEGACY_GOALS = {
    "lose": WeightGoal.LOSE,
    "maintain": WeightGoal.MAINTAIN,
    "gain": WeightGoal.GAIN,
}

_logger = logging.getLogger(__name__)


def calculate_bmr(profile: Profile) -> float:
    """Return basal metabolic rate in kcal/day."""
    weight_kg = profile.weight_lbs * KG_PER_LB
    height_cm = profile.height_total_in * CM_PER_IN
    base = 10 * weight_kg + 6.25 * height_cm - 5 * profile.age
    return base + profile.sex.bmr_offset


def calculate_tdee(profile: Profile) -> float:
    """Return total daily energy expenditure in kcal/day."""
    return calculate_bmr(profile) * profile.activity_level.multiplier


def calculate_daily_calories(profile: Profile) -> int:
    """Return the daily calorie target, never below zero."""
    target = round_half_up(calculate_tdee(profile) + profile.weight_goal.calorie_delta)
    return max(target, 0)


def calculate_protein_target(weight_lbs: float) -> int:
    """Return the daily protein target in grams (1.2 g per kg)."""
    return round_half_up(weight_lbs / PROTEIN_LBS_PER_KG * PROTEIN_G_PER_KG)


def calculate_fat_target(weight_lbs: float) -> int:
    """Return the daily fat target in grams."""
    return round_half_up(weight_lbs * FAT_G_PER_LB)


def calculate_targets(profile: Profile) -> DailyTargets:
    """Return BMR, TDEE and the daily calorie, protein and fat targets."""
    return DailyTargets(
        bmr=calculate_bmr(profile),
        tdee=calculate_tdee(profile),
        calories=calculate_daily_calories(profile),
        protein_g=calculate_protein_target(profile.weight_lbs),
        fat_g=calculate_fat_target(profile.weight_lbs),
    )


def calculate_ideal_weight(profile: Profile) -> int | None:
    """Return Miller's (1983) ideal body weight in pounds.

    The formula is only defined from five feet upwards; shorter profiles
    return None.
    """
    total_in = profile.height_total_in
    if total_in < INCHES_IN_FIVE_FEET:
        return None
    inches_over = total_in - INCHES_IN_FIVE_FEET
    if profile.sex is Sex.MALE:
        ideal_kg = 56.2 + 1.41 * inches_over
    else:
        ideal_kg = 53.1 + 1.36 * inches_over
    return round_half_up(ideal_kg * LBS_PER_KG)


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity, matching stored targets."""
    return math.floor(value + 0.5)


def parse_profile(payload: Mapping[str, object]) -> Profile:
    """Build a profile from a loosely typed payload.

    Missing, unparseable or non-positive fields are replaced by defaults
    (25 years, 150 lb, 5'10", male, sedentary, maintain) so a target can
    always be calculated.
    """
    defaulted: list[str] = []

    age = _positive_int(payload.get("age"))
    if age is None:
        age = DEFAULT_AGE
        defaulted.append("age")

    weight_lbs = _positive_float(payload.get("weight_lbs"))
    if weight_lbs is None:
        weight_lbs = DEFAULT_WEIGHT_LBS
        defaulted.append("weight_lbs")

    height_ft = _positive_int(payload.get("height_ft"))
    if height_ft is None:
        height_ft = DEFAULT_HEIGHT_FT
        defaulted.append("height_ft")

    height_in = _non_negative_int(payload.get("height_in"))
    if height_in is None:
        height_in = DEFAULT_HEIGHT_IN
        defaulted.append("height_in")

    sex = parse_sex(payload.get("sex", payload.get("gender")))
    if sex is None:
        sex = DEFAULT_SEX
        defaulted.append("sex")

    activity_level = parse_activity_level(payload.get("activity_level"))
    if activity_level is None:
        activity_level = DEFAULT_ACTIVITY
        defaulted.append("activity_level")

    weight_goal = parse_weight_goal(payload.get("weight_goal"))
    if weight_goal is None:
        weight_goal = DEFAULT_GOAL
        defaulted.append("weight_goal")

    weigh_day = parse_weekday(payload.get("weigh_day"))
    if weigh_day is None:
        weigh_day = DEFAULT_WEIGH_DAY

    if defaulted:
        _logger.info("Profile fields defaulted: %s", ", ".join(defaulted))

    timezone = payload.get("timezone")
    return Profile(
        age=age,
        sex=sex,
        weight_lbs=weight_lbs,
        height_ft=height_ft,
        height_in=height_in,
        activity_level=activity_level,
        weight_goal=weight_goal,
        target_weight_lbs=_positive_float(payload.get("target_weight_lbs")),
        weigh_day=weigh_day,
        timezone=str(timezone) if timezone else None,
        daily_calorie_target=_non_negative_int(payload.get("daily_calorie_target")),
    )


def parse_sex(value: object) -> Sex | None:
    """Parse a stored sex/gender value."""
    if isinstance(value, Sex):
        return value
    if isinstance(value, str):
        try:
            return Sex(value.strip().lower())
        except ValueError:
            return None
    return None


def parse_activity_level(value: object) -> ActivityLevel | None:
    """Parse an activity level from its key or stringified multiplier."""
    if isinstance(value, ActivityLevel):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for level in ActivityLevel:
            if level.value.key == key:
                return level
    number = _to_float(value)
    if number is None:
        return None
    for level in ActivityLevel:
        if math.isclose(level.multiplier, number):
            return level
    return None


def parse_weight_goal(value: object) -> WeightGoal | None:
    """Parse a weight goal from its key, legacy word or calorie delta."""
    if isinstance(value, WeightGoal):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _LEGACY_GOALS:
            return _LEGACY_GOALS[key]
        for goal in WeightGoal:
            if goal.value.key == key:
                return goal
    number = _to_float(value)
    if number is None:
        return None
    for goal in WeightGoal:
        if goal.calorie_delta == number:
            return goal
    return None


def parse_weekday(value: object) -> Weekday | None:
    """Parse a weigh day (0=Sunday ... 6=Saturday)."""
    number = _to_float(value)
    if number is None or not number.is_integer():
        return None
    try:
        return Weekday(int(number))
    except ValueError:
        return None


def _to_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _positive_float(value: object) -> float | None:
    number = _to_float(value)
    if number is None or number <= 0:
        return None
    return number


def _positive_int(value: object) -> int | None:
    number = _to_float(value)
    if number is None or int(number) <= 0:
        return None
    return int(number)


def _non_negative_int(value: object) -> int | None:
    number = _to_float(value)
    if number is None or number < 0:
        return None
    return int(number)
