"""Weigh-in trend and schedule projections."""

import math
from collections.abc import Sequence
from datetime import date

from diet_tracker.domain.profiles import WeightGoal
from diet_tracker.domain.weigh_ins import Projection, WeighIn

DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30


def project_weigh_ins(
    samples: Sequence[WeighIn],
    target_weight_lbs: float | None,
    goal: WeightGoal | None,
    today: date,
    ideal_weight_lbs: int | None = None,
) -> Projection:
    """Project when the target weight will be reached.

    The trajectory uses the average rate observed between the first and the
    latest weigh-in; the schedule uses the profile's weekly goal. Any
    projection that would divide by zero or move away from the target is
    left as None.
    """
    ordered = sorted(samples, key=lambda sample: sample.day)
    if not ordered:
        return Projection(
            today=today,
            current_weight_lbs=None,
            target_weight_lbs=target_weight_lbs,
            remaining_lbs=None,
            observed_daily_rate=None,
            trajectory_days=None,
            schedule_days=None,
            schedule_delta_days=None,
            ideal_weight_lbs=ideal_weight_lbs,
        )

    first = ordered[0]
    latest = ordered[-1]
    current = latest.weight_lbs
    goal_daily_loss = goal.weekly_loss_lbs / DAYS_PER_WEEK if goal else None

    last_change = None
    total_change = None
    observed_rate = None
    if len(ordered) >= 2:  # noqa: PLR2004
        last_change = current - ordered[-2].weight_lbs
        total_change = current - first.weight_lbs
        days_elapsed = max(1, (latest.day - first.day).days)
        observed_rate = (first.weight_lbs - current) / days_elapsed

    ideal_weight_days = None
    if ideal_weight_lbs is not None:
        ideal_weight_days = _days_toward(
            current - ideal_weight_lbs, goal_daily_loss, today
        )

    if target_weight_lbs is None:
        return Projection(
            today=today,
            current_weight_lbs=current,
            target_weight_lbs=None,
            remaining_lbs=None,
            observed_daily_rate=observed_rate,
            trajectory_days=None,
            schedule_days=None,
            schedule_delta_days=None,
            last_change_lbs=last_change,
            total_change_lbs=total_change,
            ideal_weight_lbs=ideal_weight_lbs,
            ideal_weight_days=ideal_weight_days,
        )

    remaining = current - target_weight_lbs
    trajectory_days = _days_toward(remaining, observed_rate, today)
    schedule_days = _days_toward(remaining, goal_daily_loss, today)
    schedule_delta = _difference(schedule_days, trajectory_days)

    progress = None
    start_distance = first.weight_lbs - target_weight_lbs
    if len(ordered) >= 2 and start_distance != 0:  # noqa: PLR2004
        progress = (first.weight_lbs - current) / start_distance * 100

    base_schedule_days = None
    base_days_from_start = _days_toward(start_distance, goal_daily_loss, first.day)
    if base_days_from_start is not None:
        base_schedule_days = (first.day - today).days + base_days_from_start

    return Projection(
        today=today,
        current_weight_lbs=current,
        target_weight_lbs=target_weight_lbs,
        remaining_lbs=remaining,
        observed_daily_rate=observed_rate,
        trajectory_days=trajectory_days,
        schedule_days=schedule_days,
        schedule_delta_days=schedule_delta,
        last_change_lbs=last_change,
        total_change_lbs=total_change,
        progress_percent=progress,
        base_schedule_days=base_schedule_days,
        days_ahead_of_base=_difference(base_schedule_days, schedule_days),
        ideal_weight_lbs=ideal_weight_lbs,
        ideal_weight_days=ideal_weight_days,
    )


def format_duration(days: float | None) -> str:
    """Format a day count as "(Xm Yd)" using 30-day months."""
    if days is None:
        return ""
    # Drop float noise so 60.00000000000001 stays 60 days.
    total_days = math.ceil(round(days, 6))
    if total_days <= 0:
        return ""
    months, remaining_days = divmod(total_days, DAYS_PER_MONTH)
    parts = []
    if months > 0:
        parts.append(f"{months}m")
    if remaining_days > 0 or months == 0:
        parts.append(f"{remaining_days}d")
    return f"({' '.join(parts)})"


def _days_toward(
    distance: float, daily_rate: float | None, origin: date
) -> float | None:
    """Return days to cover a distance at a rate moving toward it.

    Counts that would land past the last representable date are dropped.
    """
    if daily_rate is None or daily_rate == 0 or distance == 0:
        return None
    days = distance / daily_rate
    if days <= 0 or not math.isfinite(days):
        return None
    if days > (date.max - origin).days:
        return None
    return days


def _difference(left: float | None, right: float | None) -> float | None:
    if left is None or right is None:
        return None
    return left - right
