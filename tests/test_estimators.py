import numpy as np
import pytest
from scipy import stats

from bootstrap_se.errors import EmptyInputError, InsufficientDataError
from bootstrap_se.model.common import mean, median, sample_standard_error


def test_mean():
    assert mean([1, 2, 3, 4, 5]) == 3.0


def test_mean_empty():
    with pytest.raises(EmptyInputError):
        mean([])


def test_median_odd_length():
    assert median([1, 2, 3, 4, 5]) == 3.0
    assert median([5, 1, 3]) == 3.0


def test_median_even_length():
    assert median([4, 1, 3, 2]) == 2.5


def test_median_empty():
    with pytest.raises(EmptyInputError):
        median([])


def test_median_does_not_sort_input():
    data = np.array([3.0, 1.0, 2.0, 5.0])
    median(data)
    np.testing.assert_array_equal(data, [3.0, 1.0, 2.0, 5.0])

    values = [9, 7, 8]
    median(values)
    assert values == [9, 7, 8]


def test_median_within_bounds():
    rng = np.random.default_rng(0)
    for size in range(1, 30):
        data = rng.normal(0.0, 5.0, size=size)
        result = median(data)
        assert data.min() <= result <= data.max()


def test_sample_standard_error():
    assert sample_standard_error([1, 2, 3, 4, 5]) == pytest.approx(
        0.70710678119, abs=1e-6
    )


def test_sample_standard_error_uses_bessel_correction():
    data = np.random.default_rng(1).normal(size=50)
    expected = np.sqrt(np.var(data, ddof=1) / len(data))
    assert sample_standard_error(data) == pytest.approx(expected)
    assert sample_standard_error(data) == pytest.approx(stats.sem(data))


@pytest.mark.parametrize("data", [[], [1.0]])
def test_sample_standard_error_insufficient_data(data):
    with pytest.raises(InsufficientDataError):
        sample_standard_error(data)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        sample_standard_error([2.0])
