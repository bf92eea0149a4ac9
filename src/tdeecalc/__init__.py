"""BMR, TDEE and calorie targets for a weight aim.

Estimates are computed once for a single weight, or at every whole-kilogram
step between the current weight and a goal weight.
"""

from __future__ import annotations

from tdeecalc.errors import PlausibilityWarning, TdeeCalcError, ValidationError
from tdeecalc.profiles.body_calc import (
    ActivityLevel,
    Aim,
    PlausibilityLimits,
    PointEstimate,
    RangeEstimate,
    Sex,
    build_request,
    estimate,
    run_estimate,
)
from tdeecalc.profiles.models import Profile, ResultRow, ResultTable

__version__ = "0.1.0"

__all__ = [
    "ActivityLevel",
    "Aim",
    "PlausibilityLimits",
    "PlausibilityWarning",
    "PointEstimate",
    "Profile",
    "RangeEstimate",
    "ResultRow",
    "ResultTable",
    "Sex",
    "TdeeCalcError",
    "ValidationError",
    "build_request",
    "estimate",
    "run_estimate",
]
