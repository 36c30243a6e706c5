import math

from fastapi import APIRouter, HTTPException

from stats_analyzer.services import descriptive
from stats_analyzer.api.schemas import (
    InputError,
    NumbersIn,
    Operation,
    OperationResult,
    StatisticalSummaryOut,
)

router = APIRouter()

# Unusable data sets raise StatisticsInputError, turned into 400 by the handler in main.py
ERROR_RESPONSES = {400: {"model": InputError}, 422: {"description": "Result exceeds the float range"}}

def ensure_finite(**results) -> None:
    """
    Reject results that overflowed to infinity (e.g. the range of [-1e308, 1e308]).
    JSON has no infinity and null is reserved for an absent mode.
    """
    for name, value in results.items():
        if isinstance(value, float) and not math.isfinite(value):
            raise HTTPException(
                status_code=422,
                detail=f"The {name} of the passed array is too large to represent.",
            )

@router.post("/summary", response_model=StatisticalSummaryOut, responses=ERROR_RESPONSES)
async def summarize(body: NumbersIn):
    """
    Accepts a JSON payload with 'numbers'.
    Returns average, maximum, median, minimum, mode, range and standard deviation.
    """
    result = descriptive.summary(body.numbers)
    ensure_finite(**result)
    return StatisticalSummaryOut(**result)

@router.post("/statistics/{operation}", response_model=OperationResult, responses=ERROR_RESPONSES)
async def compute(operation: Operation, body: NumbersIn):
    """
    Computes a single statistic, named in the path, over 'numbers'.
    """
    func = descriptive.OPERATIONS[operation.value]
    result = func(body.numbers)
    ensure_finite(**{operation.value: result})
    return OperationResult(operation=operation, result=result)
