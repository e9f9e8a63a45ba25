"""
Central Limit Theorem cross-check

Estimates the standard error of the mean by drawing fresh samples from the
population, and provides the closed-form sigma / sqrt(n) for comparison.
"""

import numpy as np
from typing import Optional

from ...errors import InvalidParameterError
from ...settings import Config
from ..bootstrap.base_bootstrap import BaseBootstrap
from ..bootstrap.resampler import resample
from ..common.estimators import mean


def _clt_iteration_static(
    population: np.ndarray, sample_size: int, iteration_rng: np.random.Generator
) -> float:
    """Mean of one fresh sample drawn from the population"""
    return mean(resample(population, sample_size, iteration_rng))


class CLTEstimator(BaseBootstrap):
    """Empirical CLT estimator of the standard error of the mean"""

    def estimate_se_mean(
        self,
        population: np.ndarray,
        sample_size: Optional[int] = None,
        n_samples: Optional[int] = None,
        random_seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        n_jobs: Optional[int] = None,
    ) -> float:
        """Standard error of the distribution of n_samples sample means

        Args:
            population: Population to sample from
            sample_size: Size of each sample (first config sample size if None)
            n_samples: Number of samples (config.n_clt_samples if None)
            random_seed: Seed (config.random_seed if neither seed nor rng given)
            rng: Parent generator of the per-iteration generators
            n_jobs: Number of jobs for parallel execution (config.n_jobs if None)

        Returns:
            Empirical standard error of the mean

        Raises:
            InvalidParameterError: If sample_size or n_samples < 1
            InsufficientDataError: If n_samples == 1
        """
        if sample_size is None:
            sample_size = self.config.sample_sizes[0]
        if n_samples is None:
            n_samples = self.config.n_clt_samples
        self._check_count("sample_size", sample_size)
        self._check_count("n_samples", n_samples)

        rng = self._resolve_rng(random_seed, rng)
        iteration_rngs = self._spawn_iteration_generators(rng, n_samples)
        sample_means = self._run_iterations(
            _clt_iteration_static,
            [(population, sample_size, child) for child in iteration_rngs],
            n_jobs=n_jobs,
        )

        return self._compute_standard_errors({"mean": np.array(sample_means)})[
            "se_mean"
        ]


def empirical_clt(
    population: np.ndarray,
    sample_size: int,
    n_samples: int,
    random_seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    n_jobs: int = 1,
) -> float:
    """Empirical CLT standard error of the mean"""
    estimator = CLTEstimator(Config(n_jobs=n_jobs))
    return estimator.estimate_se_mean(
        population,
        sample_size=sample_size,
        n_samples=n_samples,
        random_seed=random_seed,
        rng=rng,
        n_jobs=n_jobs,
    )


def theoretical_clt_se(population_std: float, sample_size: int) -> float:
    """Closed-form standard error of the mean, sigma / sqrt(n)"""
    if population_std < 0:
        raise InvalidParameterError(
            f"Standard deviation must be non-negative, got {population_std}"
        )
    if sample_size < 1:
        raise InvalidParameterError(
            f"Sample size must be positive, got {sample_size}"
        )
    return float(population_std / np.sqrt(sample_size))
