"""BMR, TDEE and calorie target calculator.

Calculates BMR with the Harris-Benedict linear model, scales it by an
activity multiplier to get TDEE, then adjusts TDEE for a weight aim (lose,
maintain, gain). With a goal weight the calculation is repeated at every
whole-kilogram step between the current and goal weight.

Inputs are trusted as-is. Values outside a coarse plausible range only
produce a PlausibilityWarning, since they usually mean the wrong unit was
used (pounds instead of kilograms, inches instead of centimetres).
"""

from __future__ import annotations

import math
import numbers
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from tdeecalc.errors import PlausibilityWarning, ValidationError
from tdeecalc.profiles.models import Profile, ResultRow, ResultTable


class Sex(Enum):
    """Biological sex for BMR calculation."""
    FEMALE = "female"
    MALE = "male"


class ActivityLevel(Enum):
    """Activity level multipliers for TDEE calculation."""
    SEDENTARY = "sedentary"      # Little or no exercise
    LIGHTLY = "lightly"          # Light exercise 1-3 days/week
    MODERATELY = "moderately"    # Moderate exercise 3-5 days/week
    VERY = "very"                # Hard exercise 6-7 days/week
    EXTREMELY = "extremely"      # Very hard exercise, physical job


class Aim(Enum):
    """Weight change direction."""
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


# Harris-Benedict activity factors
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY: 1.375,
    ActivityLevel.MODERATELY: 1.55,
    ActivityLevel.VERY: 1.725,
    ActivityLevel.EXTREMELY: 1.9,
}

GAIN_SURPLUS = 300  # kcal/day above TDEE
LOSS_FRACTION = 0.8  # fraction of TDEE kept when losing

# Floating point fuzz when counting unit steps between two weights
_STEP_FUZZ = 1e-10


@dataclass(frozen=True)
class PlausibilityLimits:
    """Bounds outside which an input probably used the wrong unit.

    Height and weight are flagged at or beyond either bound, age at or above
    its maximum.
    """

    height_min_cm: float = 100.0
    height_max_cm: float = 250.0
    weight_min_kg: float = 30.0
    weight_max_kg: float = 250.0
    age_max_years: float = 100.0

    def check(self, profile: Profile) -> list[str]:
        """Return advisory messages for implausible profile values."""
        advisories = []
        if profile.height >= self.height_max_cm or profile.height <= self.height_min_cm:
            advisories.append("Make sure you have input your height in cm")
        if profile.weight >= self.weight_max_kg or profile.weight <= self.weight_min_kg:
            advisories.append("Make sure you have input your weight in kg")
        if profile.age >= self.age_max_years:
            advisories.append("Make sure you have input your age in years")
        return advisories

    def check_goal(self, goal: float) -> list[str]:
        """Return advisory messages for an implausible goal weight."""
        if goal >= self.weight_max_kg or goal <= self.weight_min_kg:
            return ["Make sure you have input your goal weight in kg"]
        return []


DEFAULT_LIMITS = PlausibilityLimits()


@dataclass(frozen=True)
class PointEstimate:
    """Estimate at the profile's weight only."""

    profile: Profile

    def weights(self) -> list[float]:
        return [self.profile.weight]


@dataclass(frozen=True)
class RangeEstimate:
    """Estimate at each kilogram step from the profile's weight to a goal.

    The walk stops one kilogram short of the goal (below it when gaining,
    above it when losing) and the goal itself is appended as the final
    weight. Only lose and gain define a walk.
    """

    profile: Profile
    goal: float

    def __post_init__(self) -> None:
        if self.profile.aim is Aim.MAINTAIN:
            raise ValidationError(
                "aim",
                self.profile.aim.value,
                "A goal weight needs aim 'lose' or 'gain', not 'maintain'",
                choices=(Aim.LOSE.value, Aim.GAIN.value),
            )

    @property
    def walk_end(self) -> float:
        """Last weight the aim-adjusted walk heads for."""
        if self.profile.aim is Aim.GAIN:
            return self.goal - 1
        return self.goal + 1

    def weights(self) -> list[float]:
        return weight_steps(self.profile.weight, self.walk_end) + [self.goal]


EstimateRequest = Union[PointEstimate, RangeEstimate]


def calculate_bmr(
    height: float,
    weight: float,
    age: float,
    sex: Sex,
) -> float:
    """Calculate Basal Metabolic Rate.

    Args:
        height: Height in centimetres
        weight: Weight in kilograms
        age: Age in years
        sex: Biological sex

    Returns:
        BMR in calories per day
    """
    if sex == Sex.FEMALE:
        return 655 + 9.6 * weight + 1.8 * height - 4.7 * age
    return 66 + 13.7 * weight + 5 * height - 6.8 * age


def calculate_tdee(bmr: float, activity: ActivityLevel) -> int:
    """Calculate Total Daily Energy Expenditure, floored to whole kcal."""
    return math.floor(bmr * ACTIVITY_MULTIPLIERS[activity])


def calculate_calories(tdee: int, aim: Aim) -> int:
    """Calorie target for a weight aim."""
    if aim == Aim.GAIN:
        return tdee + GAIN_SURPLUS
    if aim == Aim.LOSE:
        return math.floor(tdee * LOSS_FRACTION)
    return tdee


def weight_steps(start: float, end: float) -> list[float]:
    """Unit steps from start toward end, never passing end.

    Steps go up when end >= start and down otherwise. The start is always
    included, so a walk toward an end on the other side yields [start].
    """
    step = 1 if end >= start else -1
    count = math.floor(abs(end - start) + _STEP_FUZZ) + 1
    return [start + step * i for i in range(count)]


def _parse_choice(enum_cls: type, value: Any, field: str, label: str) -> Any:
    """Parse an enum member from itself or its string value."""
    if isinstance(value, enum_cls):
        return value

    choices = [member.value for member in enum_cls]
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass

    quoted = ", ".join(f"'{c}'" for c in choices)
    raise ValidationError(
        field,
        value,
        f"{label} must be one of: {quoted} (got {value!r})",
        choices=choices,
    )


def _parse_number(value: Any, field: str) -> float:
    """Accept a finite real number, keeping ints as ints."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(field, value, f"{field} must be a number (got {value!r})")
    if not math.isfinite(value):
        raise ValidationError(field, value, f"{field} must be finite (got {value!r})")
    return value


def build_request(
    height: float,
    weight: float,
    age: float,
    sex: Union[str, Sex],
    activity: Union[str, ActivityLevel],
    aim: Union[str, Aim],
    goal: Optional[float] = None,
) -> EstimateRequest:
    """Validate raw inputs into a PointEstimate or RangeEstimate.

    Raises:
        ValidationError: If sex, activity or aim is not recognised, a number
            is not a finite real, or a goal is combined with aim 'maintain'
    """
    profile = Profile(
        height=_parse_number(height, "height"),
        weight=_parse_number(weight, "weight"),
        age=_parse_number(age, "age"),
        sex=_parse_choice(Sex, sex, "sex", "Sex"),
        activity=_parse_choice(ActivityLevel, activity, "activity", "Activity"),
        aim=_parse_choice(Aim, aim, "aim", "Aim"),
    )

    if goal is None:
        return PointEstimate(profile)
    return RangeEstimate(profile, _parse_number(goal, "goal"))


def _row(profile: Profile, weight: float, aim: Aim) -> ResultRow:
    bmr = calculate_bmr(profile.height, weight, profile.age, profile.sex)
    tdee = calculate_tdee(bmr, profile.activity)
    return ResultRow(
        weight=weight,
        bmr=bmr,
        tdee=tdee,
        calories=calculate_calories(tdee, aim),
    )


def run_estimate(
    request: EstimateRequest,
    limits: Optional[PlausibilityLimits] = None,
) -> ResultTable:
    """Compute the result table for a validated request.

    Each advisory is also issued as a PlausibilityWarning.

    Args:
        request: PointEstimate or RangeEstimate
        limits: Plausibility bounds, DEFAULT_LIMITS if None

    Returns:
        ResultTable with one row per evaluated weight
    """
    profile = request.profile
    limits = limits or DEFAULT_LIMITS
    advisories = limits.check(profile)
    if isinstance(request, RangeEstimate):
        # One row per kilogram toward the goal
        advisories.extend(limits.check_goal(request.goal))
    for message in advisories:
        warnings.warn(message, PlausibilityWarning, stacklevel=2)

    if isinstance(request, RangeEstimate):
        *walk, goal = request.weights()
        rows = [_row(profile, w, profile.aim) for w in walk]
        # Maintenance at the goal weight
        rows.append(_row(profile, goal, Aim.MAINTAIN))
        return ResultTable(
            profile=profile,
            rows=tuple(rows),
            goal=request.goal,
            advisories=tuple(advisories),
        )

    return ResultTable(
        profile=profile,
        rows=(_row(profile, profile.weight, profile.aim),),
        advisories=tuple(advisories),
    )


def estimate(
    height: float,
    weight: float,
    age: float,
    sex: Union[str, Sex],
    activity: Union[str, ActivityLevel],
    aim: Union[str, Aim],
    goal: Optional[float] = None,
    *,
    limits: Optional[PlausibilityLimits] = None,
) -> ResultTable:
    """Calculate BMR, TDEE and calorie targets.

    Args:
        height: Height in centimetres
        weight: Current weight in kilograms
        age: Age in years
        sex: "female" or "male"
        activity: "sedentary", "lightly", "moderately", "very", "extremely"
        aim: "lose", "maintain" or "gain"
        goal: Optional goal weight in kilograms. When given, rows are
            computed at every kilogram step toward it plus a final
            maintenance row at the goal weight
        limits: Plausibility bounds for unit advisories

    Returns:
        ResultTable with columns weight, bmr, tdee, calories

    Raises:
        ValidationError: If an input is rejected; nothing is computed

    Example:
        >>> estimate(182, 84, 23, "male", "moderately", "gain")[0].calories
        3354
    """
    request = build_request(height, weight, age, sex, activity, aim, goal)
    return run_estimate(request, limits)
