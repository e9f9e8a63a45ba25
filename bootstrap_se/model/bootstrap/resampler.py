"""
Resampling with replacement
"""

import numpy as np

from ...errors import EmptyInputError, InvalidParameterError


def resample(source, sample_size: int, rng: np.random.Generator) -> np.ndarray:
    """Draw sample_size elements uniformly, independently, with replacement

    Args:
        source: Non-empty sequence to draw from (not modified)
        sample_size: Number of draws (positive)
        rng: Random generator

    Returns:
        New array of length sample_size

    Raises:
        EmptyInputError: If source is empty
        InvalidParameterError: If sample_size < 1
    """
    source = np.asarray(source, dtype=float)
    if source.size == 0:
        raise EmptyInputError("Cannot resample from an empty source")
    if sample_size < 1:
        raise InvalidParameterError(
            f"Sample size must be positive, got {sample_size}"
        )

    indices = rng.integers(0, source.size, size=int(sample_size))
    return source.ravel()[indices]
