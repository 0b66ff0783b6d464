"""Weigh-in validation and progress projection service."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from diet_tracker.domain.profiles import Profile
from diet_tracker.domain.weigh_ins import Projection, WeighIn
from diet_tracker.services.clock import local_today
from diet_tracker.services.projections import project_weigh_ins
from diet_tracker.services.targets import calculate_ideal_weight

_logger = logging.getLogger(__name__)


class InvalidWeighInError(ValueError):
    """Raised when a weigh-in weight is not a positive number."""


def validate_weight(value: object) -> float:
    """Return the weight as a float or raise InvalidWeighInError."""
    if isinstance(value, bool):
        raise InvalidWeighInError("Please enter a valid weight")
    try:
        weight = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidWeighInError("Please enter a valid weight") from exc
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeighInError("Please enter a valid weight")
    return weight


@dataclass
class WeighInService:
    """Service that projects weight progress for a profile."""

    default_timezone: str = "UTC"

    def get_progress(
        self,
        profile: Profile,
        samples: Sequence[WeighIn],
        today: date | None = None,
    ) -> Projection:
        """Return the projection toward the profile's target weight."""
        resolved_today = today or local_today(
            profile.timezone or self.default_timezone
        )
        return project_weigh_ins(
            self.clean_samples(samples),
            target_weight_lbs=profile.target_weight_lbs,
            goal=profile.weight_goal,
            today=resolved_today,
            ideal_weight_lbs=calculate_ideal_weight(profile),
        )

    def build_weigh_in(
        self, weight: object, day: date, timezone_name: str | None = None
    ) -> WeighIn:
        """Validate a new weigh-in; dates after today are rejected."""
        weight_lbs = validate_weight(weight)
        today = local_today(timezone_name or self.default_timezone)
        if day > today:
            raise InvalidWeighInError("Weigh-in date cannot be in the future")
        return WeighIn(day=day, weight_lbs=weight_lbs)

    @staticmethod
    def clean_samples(samples: Sequence[WeighIn]) -> list[WeighIn]:
        """Drop invalid weights and order samples by date."""
        cleaned = []
        for sample in samples:
            if not math.isfinite(sample.weight_lbs) or sample.weight_lbs <= 0:
                _logger.warning(
                    "Dropping invalid weigh-in: day=%s weight=%s",
                    sample.day,
                    sample.weight_lbs,
                )
                continue
            cleaned.append(sample)
        return sorted(cleaned, key=lambda sample: sample.day)
