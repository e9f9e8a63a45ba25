"""
Statistic estimators

Pure functions over a one-dimensional sequence of numbers. None of them
modify the caller's data.
"""

import numpy as np
from scipy import stats
from typing import Sequence, Union

from ...errors import EmptyInputError, InsufficientDataError

ArrayLike = Union[Sequence[float], np.ndarray]


def _as_array(data: ArrayLike) -> np.ndarray:
    """Convert input to a 1-D float array (no copy if already float64)"""
    return np.asarray(data, dtype=float).ravel()


def mean(data: ArrayLike) -> float:
    """Arithmetic mean

    Args:
        data: Sequence of numbers

    Returns:
        Mean of data

    Raises:
        EmptyInputError: If data is empty
    """
    values = _as_array(data)
    if values.size == 0:
        raise EmptyInputError("Cannot compute mean of empty input")
    return float(values.mean())


def median(data: ArrayLike) -> float:
    """Median computed on a sorted copy of the input

    For odd length, the middle element of the sorted sequence. For even
    length, the average of the two middle elements. The input is never
    sorted in place.

    Args:
        data: Sequence of numbers

    Returns:
        Median of data

    Raises:
        EmptyInputError: If data is empty
    """
    values = np.sort(_as_array(data))
    n = values.size
    if n == 0:
        raise EmptyInputError("Cannot compute median of empty input")
    if n % 2 == 0:
        return float((values[n // 2 - 1] + values[n // 2]) / 2.0)
    return float(values[n // 2])


def sample_standard_error(data: ArrayLike) -> float:
    """Standard error sqrt(s^2 / n) with Bessel-corrected variance s^2

    Args:
        data: Sequence of numbers (e.g. a bootstrap distribution)

    Returns:
        Standard error of data

    Raises:
        InsufficientDataError: If data has fewer than 2 elements
    """
    values = _as_array(data)
    if values.size < 2:
        raise InsufficientDataError(
            f"Standard error requires at least 2 observations, got {values.size}"
        )
    return float(stats.sem(values, ddof=1))
