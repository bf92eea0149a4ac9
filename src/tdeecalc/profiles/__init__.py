"""Body calculations for BMR, TDEE and calorie targets."""

from tdeecalc.profiles.body_calc import (
    ActivityLevel,
    Aim,
    PointEstimate,
    RangeEstimate,
    Sex,
    estimate,
)
from tdeecalc.profiles.models import Profile, ResultRow, ResultTable

__all__ = [
    "ActivityLevel",
    "Aim",
    "PointEstimate",
    "Profile",
    "RangeEstimate",
    "ResultRow",
    "ResultTable",
    "Sex",
    "estimate",
]
