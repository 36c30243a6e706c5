"""Descriptive statistics over a sequence of finite real numbers.

Every public function validates its argument first and raises one of the
errors from :mod:`stats_analyzer.services.errors` for unusable input. None of
them modify the sequence they are given.
"""
from __future__ import annotations

import math
import statistics
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from numbers import Integral, Real
from typing import Any, Callable, Optional, TypedDict

from stats_analyzer.services.errors import (
    EmptySequenceError,
    InvalidElementError,
    NotASequenceError,
)

__all__: list[str] = [
    "StatisticalSummary",
    "OPERATIONS",
    "validate",
    "average",
    "maximum",
    "minimum",
    "median",
    "mode",
    "range",
    "standard_deviation",
    "summary",
]

# Sequences of characters are never treated as data sets
_TEXT_TYPES = (str, bytes, bytearray)


class StatisticalSummary(TypedDict):
    average: float
    maximum: float
    median: float
    minimum: float
    mode: Optional[list[float]]
    range: float
    standard_deviation: float


def validate(values: Any) -> None:
    """
    Check that ``values`` is usable as a numeric data set.

    Checks run in a fixed order: sequence type, then every element, then
    emptiness. So ``[]`` of the right type raises EmptySequenceError while
    ``"x"`` raises NotASequenceError.
    """
    if not isinstance(values, Sequence) or isinstance(values, _TEXT_TYPES):
        raise NotASequenceError(values)

    for index, value in enumerate(values):
        # bool is an int subclass but not a number here
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidElementError(index, value)
        if isinstance(value, Integral):
            # Integers beyond float range cannot be reported as results
            try:
                float(value)
            except OverflowError:
                raise InvalidElementError(index, value) from None
        elif not math.isfinite(value):
            raise InvalidElementError(index, value)

    if len(values) == 0:
        raise EmptySequenceError()


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``."""
    validate(values)
    # Exact summation: no intermediate overflow for large finite floats
    return statistics.mean(values)


def maximum(values: Sequence[float]) -> float:
    """Largest value in ``values``."""
    validate(values)
    return reduce(lambda acc, cur: acc if acc > cur else cur, values)


def minimum(values: Sequence[float]) -> float:
    """Smallest value in ``values``."""
    validate(values)
    return reduce(lambda acc, cur: acc if acc < cur else cur, values)


def median(values: Sequence[float]) -> float:
    """
    Middle value of ``values`` once sorted.
    For an even count the two middle values are averaged.
    """
    validate(values)
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return average([ordered[middle], ordered[middle - 1]])
    return ordered[middle]


def mode(values: Sequence[float]) -> Optional[list[float]]:
    """
    Most frequent value(s) of ``values``, sorted ascending.

    Returns None when there is no mode: for a single value, and when every
    distinct value occurs equally often (e.g. ``[1, 1, 1]`` or ``[1, 2, 1, 2]``).
    """
    validate(values)
    if len(values) == 1:
        return None

    frequencies = Counter(values)
    highest = max(frequencies.values())
    candidates = [value for value, count in frequencies.items() if count == highest]
    if highest * len(candidates) == len(values):
        return None
    return sorted(candidates)


def range(values: Sequence[float]) -> float:
    """Difference between the largest and smallest value of ``values``."""
    validate(values)
    return maximum(values) - minimum(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation of ``values`` (divides by n, not n - 1)."""
    validate(values)
    return statistics.pstdev(values, mu=average(values))


def summary(values: Sequence[float]) -> StatisticalSummary:
    """
    Compute average, maximum, median, minimum, mode, range and standard
    deviation of ``values`` in one call.
    """
    validate(values)
    return {
        "average": average(values),
        "maximum": maximum(values),
        "median": median(values),
        "minimum": minimum(values),
        "mode": mode(values),
        "range": range(values),
        "standard_deviation": standard_deviation(values),
    }


# Single-value operations addressable by name (summary excluded)
OPERATIONS: dict[str, Callable[[Sequence[float]], Any]] = {
    "average": average,
    "maximum": maximum,
    "minimum": minimum,
    "median": median,
    "mode": mode,
    "range": range,
    "standard_deviation": standard_deviation,
}
