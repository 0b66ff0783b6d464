"""Domain models for weigh-ins and weight projections."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID


@dataclass(frozen=True)
class WeighIn:
    """A single dated body-mass observation."""

    day: date
    weight_lbs: float
    id: UUID | None = None


@dataclass(frozen=True)
class Projection:
    """Trend and schedule projections toward a target weight."""

    today: date
    current_weight_lbs: float | None
    target_weight_lbs: float | None
    remaining_lbs: float | None
    observed_daily_rate: float | None
    trajectory_days: float | None
    schedule_days: float | None
    schedule_delta_days: float | None
    last_change_lbs: float | None = None
    total_change_lbs: float | None = None
    progress_percent: float | None = None
    base_schedule_days: float | None = None
    days_ahead_of_base: float | None = None
    ideal_weight_lbs: int | None = None
    ideal_weight_days: float | None = None

    @property
    def trajectory_date(self) -> date | None:
        """Return the completion date implied by the observed rate."""
        return _offset(self.today, self.trajectory_days)

    @property
    def schedule_date(self) -> date | None:
        """Return the completion date implied by the stated goal."""
        return _offset(self.today, self.schedule_days)

    @property
    def base_schedule_date(self) -> date | None:
        """Return the completion date planned from the first weigh-in."""
        return _offset(self.today, self.base_schedule_days)

    @property
    def ideal_weight_date(self) -> date | None:
        """Return the date the ideal weight is reached on schedule."""
        return _offset(self.today, self.ideal_weight_days)

    @property
    def target_reached(self) -> bool:
        """Return True when the latest weigh-in is at or past the target."""
        if self.progress_percent is not None:
            return self.progress_percent >= 100
        return self.remaining_lbs == 0


def _offset(today: date, days: float | None) -> date | None:
    if days is None:
        return None
    return today + timedelta(days=days)
