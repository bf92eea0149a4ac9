"""Data models for estimator inputs and results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, Optional

import pandas as pd

if TYPE_CHECKING:
    from tdeecalc.profiles.body_calc import ActivityLevel, Aim, Sex


# Column order of every result table; charting consumers read these by name
COLUMNS = ("weight", "bmr", "tdee", "calories")


@dataclass(frozen=True)
class Profile:
    """Personal parameters an estimate is computed from."""

    height: float  # cm
    weight: float  # kg, current weight or start of a range
    age: float  # years
    sex: Sex
    activity: ActivityLevel
    aim: Aim

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "height": self.height,
            "weight": self.weight,
            "age": self.age,
            "sex": self.sex.value,
            "activity": self.activity.value,
            "aim": self.aim.value,
        }


@dataclass(frozen=True)
class ResultRow:
    """BMR, TDEE and calorie target at one weight."""

    weight: float  # kg
    bmr: float  # kcal/day
    tdee: int  # kcal/day, floored
    calories: int  # kcal/day

    def to_dict(self) -> dict[str, Any]:
        return {
            "weight": self.weight,
            "bmr": self.bmr,
            "tdee": self.tdee,
            "calories": self.calories,
        }


@dataclass(frozen=True)
class ResultTable:
    """Ordered result rows for one estimate.

    In range mode the last row is the goal weight, whose calories are the
    maintenance TDEE at that weight rather than an aim-adjusted target.

    Attributes:
        profile: Profile the rows were computed from
        rows: One row per evaluated weight, in walk order
        goal: Goal weight in range mode, None for a single-weight estimate
        advisories: Unit advisories raised for the inputs
    """

    profile: Profile
    rows: tuple[ResultRow, ...]
    goal: Optional[float] = None
    advisories: tuple[str, ...] = ()

    @property
    def columns(self) -> tuple[str, ...]:
        return COLUMNS

    @property
    def mode(self) -> str:
        """'range' when a goal weight was given, otherwise 'point'."""
        return "point" if self.goal is None else "range"

    @property
    def goal_row(self) -> Optional[ResultRow]:
        """The appended maintenance row at the goal weight, if any."""
        if self.goal is None:
            return None
        return self.rows[-1]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ResultRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> ResultRow:
        return self.rows[index]

    def to_records(self) -> list[dict[str, Any]]:
        """Rows as a list of dicts keyed by column name."""
        return [row.to_dict() for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        """Rows as a DataFrame with columns weight, bmr, tdee, calories."""
        return pd.DataFrame(self.to_records(), columns=list(COLUMNS))

    def summary(self) -> str:
        """Human-readable summary of the estimate."""
        first = self.rows[0]
        lines = [
            f"Aim: {self.profile.aim.value}",
            f"BMR: {first.bmr:.1f} kcal/day",
            f"TDEE: {first.tdee} kcal/day",
            f"Target: {first.calories} kcal/day ({first.calories - first.tdee:+d} from TDEE)",
        ]

        goal_row = self.goal_row
        if goal_row is not None:
            lines.append(
                f"At goal weight {goal_row.weight:g} kg: "
                f"maintain on {goal_row.calories} kcal/day"
            )

        return "\n".join(lines)
