from enum import Enum
from typing import Any, List, Optional, Union
from pydantic import BaseModel

# Names accepted by POST /statistics/{operation}
class Operation(str, Enum):
    average = "average"
    maximum = "maximum"
    minimum = "minimum"
    median = "median"
    mode = "mode"
    range = "range"
    standard_deviation = "standard_deviation"

# Input schema for /summary and /statistics/{operation}
class NumbersIn(BaseModel):
    # Any JSON value: the statistics validator decides what is acceptable
    numbers: Any

    model_config = {"extra": "forbid"}  # Forbid extra fields in input

# Output schema for /summary
class StatisticalSummaryOut(BaseModel):
    average: float
    maximum: float
    median: float
    minimum: float
    mode: Optional[List[float]]  # null when the data set has no mode
    range: float
    standard_deviation: float   # Population standard deviation

# Output schema for /statistics/{operation}
class OperationResult(BaseModel):
    operation: Operation
    result: Optional[Union[float, List[float]]]  # list/null only for mode

# Body of a 400 response caused by an unusable data set
class InputError(BaseModel):
    detail: str
    error: str  # not_a_sequence, invalid_element or empty_sequence
