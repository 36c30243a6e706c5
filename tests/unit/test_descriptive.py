import math

import pytest
from stats_analyzer.services import descriptive
from stats_analyzer.services.errors import (
    EmptySequenceError,
    InvalidElementError,
    NotASequenceError,
    StatisticsInputError,
)

DATA = [4, 2, 6, 1, 3, 7, 5, 3]

ALL_FUNCTIONS = [
    descriptive.average,
    descriptive.maximum,
    descriptive.minimum,
    descriptive.median,
    descriptive.mode,
    descriptive.range,
    descriptive.standard_deviation,
    descriptive.summary,
]

DATA_SETS = [
    [4, 8, 2, 3, 5],
    [-10, -20, -30, -40, -50, -60],
    [1, -1, 2, -2, 3, -3, 4],
    [0, 0, 0, 0, 0],
    [1.2, 3.4, 5.6, 7.8],
    [-1.5, -2.5, -3.5, -4.5, -5.5],
    [42],
    [5, 1, 1, 1, 3, -2, 2, 5, 7, 4, 5, 16],
]


def test_average():
    assert descriptive.average(DATA) == 3.875

def test_average_single_element():
    assert descriptive.average([-1.2]) == -1.2

def test_maximum_and_minimum():
    assert descriptive.maximum(DATA) == 7
    assert descriptive.minimum(DATA) == 1
    assert descriptive.maximum([-5, -1, -3]) == -1
    assert descriptive.minimum([1.5, -2.5, 0]) == -2.5

def test_median_even():
    assert descriptive.median(DATA) == 3.5

def test_median_odd():
    assert descriptive.median([4, 8, 2, 3, 5]) == 4

def test_median_sorts_numerically():
    # lexicographic order would put 10 before 9
    assert descriptive.median([10, 9, 100]) == 10

def test_mode_single_mode():
    assert descriptive.mode(DATA) == [3]

def test_mode_multiple_modes_sorted():
    assert descriptive.mode([9, 1, 4, 3, 4, 9]) == [4, 9]

def test_mode_absent_for_single_element():
    assert descriptive.mode([1]) is None

def test_mode_absent_for_uniform_frequencies():
    assert descriptive.mode([1, 1, 1, 1, 1]) is None
    assert descriptive.mode([1, 2, 1, 2]) is None
    assert descriptive.mode([3, 1, 2]) is None

def test_mode_absent_is_not_empty_list():
    assert descriptive.mode([1, 2]) != []

def test_mode_floats():
    assert descriptive.mode([1.5, 2.5, 1.5, 0.5]) == [1.5]

def test_range():
    assert descriptive.range(DATA) == 6
    assert descriptive.range([-42]) == 0

def test_standard_deviation():
    assert round(descriptive.standard_deviation(DATA), 4) == 1.8998

def test_standard_deviation_is_population():
    assert descriptive.standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == 2.0

def test_standard_deviation_single_element():
    assert descriptive.standard_deviation([42]) == 0

def test_standard_deviation_large_finite_values():
    assert descriptive.standard_deviation([1e200, -1e200]) == 1e200
    assert descriptive.standard_deviation([-1e308, 1e308]) == 1e308

def test_average_large_finite_values():
    assert descriptive.average([1e308, 1e308]) == 1e308
    assert descriptive.average([10**300, 10**300]) == 10**300

def test_median_even_large_finite_values():
    assert descriptive.median([1e308, 1e308, 1.0, 0.5]) == 1e308 / 2
    assert descriptive.median([1e308, 1e308]) == 1e308

def test_summary():
    result = descriptive.summary(DATA)
    assert result == {
        "average": 3.875,
        "maximum": 7,
        "median": 3.5,
        "minimum": 1,
        "mode": [3],
        "range": 6,
        "standard_deviation": descriptive.standard_deviation(DATA),
    }

def test_summary_single_element():
    assert descriptive.summary([42]) == {
        "average": 42,
        "maximum": 42,
        "median": 42,
        "minimum": 42,
        "mode": None,
        "range": 0,
        "standard_deviation": 0,
    }

def test_summary_always_has_mode_key():
    result = descriptive.summary([1, 2, 3])
    assert "mode" in result
    assert result["mode"] is None
    assert len(result) == 7

def test_operations_registry():
    assert set(descriptive.OPERATIONS) == {
        "average", "maximum", "minimum", "median", "mode", "range", "standard_deviation",
    }
    assert descriptive.OPERATIONS["range"] is descriptive.range

def test_tuples_are_accepted():
    assert descriptive.average((1, 2, 3)) == 2


# --- validation ---

@pytest.mark.parametrize("func", ALL_FUNCTIONS)
@pytest.mark.parametrize("value", [1, "not an array", "", False, None, {}, {1, 2}, b"abc"])
def test_not_a_sequence(func, value):
    with pytest.raises(NotASequenceError, match="The passed argument is not an array."):
        func(value)

@pytest.mark.parametrize("func", ALL_FUNCTIONS)
def test_empty_sequence(func):
    with pytest.raises(EmptySequenceError, match="The passed array contains no elements."):
        func([])

@pytest.mark.parametrize("func", ALL_FUNCTIONS)
@pytest.mark.parametrize("bad", ["4", None, True, [4], math.nan, math.inf, -math.inf])
def test_invalid_element(func, bad):
    with pytest.raises(InvalidElementError, match="The passed array may only contain valid numbers."):
        func([1, 2, 3, bad])

def test_invalid_element_details():
    with pytest.raises(InvalidElementError) as exc_info:
        descriptive.validate([1, 2, "3"])
    assert exc_info.value.details == {"index": 2, "type": "str"}
    assert exc_info.value.kind == "invalid_element"

def test_validate_accepts_valid_data():
    assert descriptive.validate(DATA) is None

def test_integer_outside_float_range_is_invalid():
    with pytest.raises(InvalidElementError) as exc_info:
        descriptive.average([1, 10**400])
    assert exc_info.value.details == {"index": 1, "type": "int"}

def test_integer_at_float_limit_is_valid():
    assert descriptive.validate([10**308]) is None

def test_error_hierarchy():
    assert issubclass(NotASequenceError, TypeError)
    assert issubclass(InvalidElementError, TypeError)
    assert issubclass(EmptySequenceError, ValueError)
    for error in (NotASequenceError, InvalidElementError, EmptySequenceError):
        assert issubclass(error, StatisticsInputError)

def test_type_checked_before_elements():
    with pytest.raises(NotASequenceError):
        descriptive.average("123")

def test_elements_checked_before_emptiness():
    with pytest.raises(InvalidElementError):
        descriptive.average(["x"])

def test_large_data_set():
    values = [42] * 200_000
    result = descriptive.summary(values)
    assert result["average"] == 42
    assert result["mode"] is None
    assert result["standard_deviation"] == 0


# --- properties ---

@pytest.mark.parametrize("func", ALL_FUNCTIONS)
def test_does_not_modify_argument(func):
    arg = list(DATA)
    func(arg)
    assert arg == DATA

@pytest.mark.parametrize("func", ALL_FUNCTIONS)
def test_repeated_calls_agree(func):
    assert func(DATA) == func(DATA)

@pytest.mark.parametrize("values", DATA_SETS)
def test_median_between_extremes(values):
    assert descriptive.minimum(values) <= descriptive.median(values) <= descriptive.maximum(values)

@pytest.mark.parametrize("values", DATA_SETS)
def test_range_is_max_minus_min(values):
    expected = descriptive.maximum(values) - descriptive.minimum(values)
    assert descriptive.range(values) == expected
    assert expected >= 0

@pytest.mark.parametrize("values", DATA_SETS)
def test_standard_deviation_zero_iff_constant(values):
    result = descriptive.standard_deviation(values)
    assert result >= 0
    assert (result == 0) == (len(set(values)) == 1)
