"""
Standard Bootstrap for Standard Error Estimation

Repeatedly resamples from the population, computes the mean and median of
each resample, and reports the standard error of both distributions.
"""

import numpy as np
from typing import Optional, Tuple

from ...settings import Config
from ..common.estimators import mean, median
from ..common.models import BootstrapSEResult
from .base_bootstrap import BaseBootstrap
from .resampler import resample


def _bootstrap_iteration_static(
    population: np.ndarray, sample_size: int, iteration_rng: np.random.Generator
) -> Tuple[float, float]:
    """Execute one bootstrap iteration

    Args:
        population: Population to resample from (read only)
        sample_size: Size of the resample
        iteration_rng: Generator owned by this iteration

    Returns:
        (mean, median) of the resample
    """
    sample = resample(population, sample_size, iteration_rng)
    return mean(sample), median(sample)


class StandardBootstrap(BaseBootstrap):
    """Standard bootstrap class

    Each resample draws sample_size values independently with replacement
    from the population.
    """

    def bootstrap_standard_errors(
        self,
        population: np.ndarray,
        n_bootstrap: Optional[int] = None,
        sample_size: Optional[int] = None,
        random_seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        n_jobs: Optional[int] = None,
    ) -> BootstrapSEResult:
        """Estimate standard errors of the mean and median by bootstrap

        Args:
            population: Population to resample from
            n_bootstrap: Number of resamples (config.n_bootstrap if None)
            sample_size: Size of each resample (first config sample size if None)
            random_seed: Seed (config.random_seed if neither seed nor rng given)
            rng: Parent generator of the per-iteration generators
            n_jobs: Number of jobs for parallel execution (config.n_jobs if None)

        Returns:
            BootstrapSEResult

        Raises:
            InvalidParameterError: If n_bootstrap or sample_size < 1
            EmptyInputError: If population is empty
            InsufficientDataError: If n_bootstrap == 1
        """
        if n_bootstrap is None:
            n_bootstrap = self.config.n_bootstrap
        if sample_size is None:
            sample_size = self.config.sample_sizes[0]
        self._check_count("n_bootstrap", n_bootstrap)
        self._check_count("sample_size", sample_size)

        rng = self._resolve_rng(random_seed, rng)
        iteration_rngs = self._spawn_iteration_generators(rng, n_bootstrap)

        iteration_args = [
            (population, sample_size, child) for child in iteration_rngs
        ]
        estimates = self._run_iterations(
            _bootstrap_iteration_static, iteration_args, n_jobs=n_jobs
        )

        means = np.array([est[0] for est in estimates])
        medians = np.array([est[1] for est in estimates])
        standard_errors = self._compute_standard_errors(
            {"mean": means, "median": medians}
        )

        return BootstrapSEResult(
            se_mean=standard_errors["se_mean"],
            se_median=standard_errors["se_median"],
            n_bootstrap=n_bootstrap,
            sample_size=sample_size,
        )


def bootstrap(
    population: np.ndarray,
    n_bootstrap: int,
    sample_size: int,
    random_seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    n_jobs: int = 1,
) -> Tuple[float, float]:
    """Bootstrap standard errors of the mean and median

    Returns:
        (se_mean, se_median)
    """
    engine = StandardBootstrap(Config(n_jobs=n_jobs))
    result = engine.bootstrap_standard_errors(
        population,
        n_bootstrap=n_bootstrap,
        sample_size=sample_size,
        random_seed=random_seed,
        rng=rng,
        n_jobs=n_jobs,
    )
    return result.as_tuple()
