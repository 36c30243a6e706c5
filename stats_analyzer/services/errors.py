"""Failure kinds raised by the descriptive statistics functions."""
from __future__ import annotations

from typing import Any

__all__: list[str] = [
    "StatisticsInputError",
    "NotASequenceError",
    "InvalidElementError",
    "EmptySequenceError",
]


class StatisticsInputError(ValueError):
    """Base error for input that cannot be used as a numeric data set."""

    kind = "invalid_input"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}


class NotASequenceError(StatisticsInputError, TypeError):
    """The input is not an ordered sequence at all."""

    kind = "not_a_sequence"

    def __init__(self, value: Any):
        super().__init__(
            "The passed argument is not an array.",
            details={"type": type(value).__name__},
        )


class InvalidElementError(StatisticsInputError, TypeError):
    """An element is not a finite real number (NaN and infinities included)."""

    kind = "invalid_element"

    def __init__(self, index: int, value: Any):
        super().__init__(
            "The passed array may only contain valid numbers.",
            details={"index": index, "type": type(value).__name__},
        )


class EmptySequenceError(StatisticsInputError):
    """The input is a valid sequence with no elements."""

    kind = "empty_sequence"

    def __init__(self):
        super().__init__("The passed array contains no elements.")
