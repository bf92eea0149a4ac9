"""Exceptions and warning categories raised by the estimator."""

from __future__ import annotations

from typing import Any, Optional, Sequence


class TdeeCalcError(Exception):
    """Base class for tdeecalc errors."""


class ValidationError(TdeeCalcError, ValueError):
    """An input was rejected before any computation took place.

    Attributes:
        field: Name of the offending parameter
        value: The value that was supplied
        choices: Allowed values, when the parameter is an enumeration
    """

    def __init__(
        self,
        field: str,
        value: Any,
        message: str,
        choices: Optional[Sequence[str]] = None,
    ):
        super().__init__(message)
        self.field = field
        self.value = value
        self.choices = tuple(choices) if choices is not None else None


class PlausibilityWarning(UserWarning):
    """A numeric input looks like it was given in the wrong unit."""
