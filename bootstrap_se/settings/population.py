"""
Population generation

Draws the synthetic ground-truth dataset that every resampling procedure
reads from.
"""

import numpy as np
from typing import Optional

from ..errors import InvalidParameterError
from .config import Config


def generate_population(
    size: int,
    mean: float,
    stddev: float,
    random_seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Generate a population of i.i.d. Normal(mean, stddev) values

    Randomness comes only from the explicit seed or generator, so the same
    seed always yields the same population.

    Args:
        size: Number of elements (positive)
        mean: Mean of the normal distribution
        stddev: Standard deviation (non-negative, 0 gives a constant population)
        random_seed: Seed for a new generator (ignored if rng is given)
        rng: Random generator to draw from

    Returns:
        np.ndarray: Read-only array of length size

    Raises:
        InvalidParameterError: If size <= 0 or stddev < 0

    Example:
        >>> population = generate_population(100, 100.0, 10.0, random_seed=42)
        >>> len(population)
        100
    """
    if size <= 0:
        raise InvalidParameterError(f"Population size must be positive, got {size}")
    if stddev < 0:
        raise InvalidParameterError(
            f"Standard deviation must be non-negative, got {stddev}"
        )

    if rng is None:
        rng = np.random.default_rng(random_seed)

    population = rng.normal(mean, stddev, size=int(size))
    population.flags.writeable = False
    return population


def generate_population_from_config(config: Config) -> np.ndarray:
    """Generate the population described by a Config"""
    return generate_population(
        size=config.population_size,
        mean=config.population_mean,
        stddev=config.population_std,
        random_seed=config.random_seed,
    )
