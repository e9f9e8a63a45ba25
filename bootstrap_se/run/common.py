"""
Common per-sample-size calculation module
"""

import tracemalloc
import numpy as np
from typing import List, Optional

from ..settings import Config
from ..model.bootstrap import StandardBootstrap
from ..model.clt import CLTEstimator, theoretical_clt_se
from ..model.common import SampleSizeResult

RESULT_COLUMNS = [
    "sample_size",
    "clt_se_mean",
    "se_mean",
    "se_median",
    "theoretical_se_mean",
    "clt_sd_mean",
    "bootstrap_sd_mean",
    "bootstrap_sd_median",
]


def distribution_sd(standard_error: float, n_statistics: int) -> float:
    """Standard deviation of a statistic distribution from its standard error"""
    return float(standard_error * np.sqrt(n_statistics))


def run_sample_size(
    population: np.ndarray,
    sample_size: int,
    config: Config,
    rng: np.random.Generator,
) -> SampleSizeResult:
    """
    Compute all standard errors for one sample size

    The empirical CLT estimate is drawn first, then the bootstrap, both from
    the same random generator.

    Args:
        population: Population to sample from
        sample_size: Sample size n
        config: Configuration object
        rng: Random generator

    Returns:
        SampleSizeResult
    """
    clt_se_mean = CLTEstimator(config).estimate_se_mean(
        population,
        sample_size=sample_size,
        n_samples=config.n_clt_samples,
        rng=rng,
    )
    bootstrap_result = StandardBootstrap(config).bootstrap_standard_errors(
        population,
        n_bootstrap=config.n_bootstrap,
        sample_size=sample_size,
        rng=rng,
    )

    return SampleSizeResult(
        sample_size=sample_size,
        clt_se_mean=clt_se_mean,
        se_mean=bootstrap_result.se_mean,
        se_median=bootstrap_result.se_median,
        theoretical_se_mean=theoretical_clt_se(config.population_std, sample_size),
        clt_sd_mean=distribution_sd(clt_se_mean, config.n_clt_samples),
        bootstrap_sd_mean=distribution_sd(
            bootstrap_result.se_mean, config.n_bootstrap
        ),
        bootstrap_sd_median=distribution_sd(
            bootstrap_result.se_median, config.n_bootstrap
        ),
    )


def format_sample_size_report(result: SampleSizeResult) -> List[str]:
    """Text lines describing one sample size result"""
    n = result.sample_size
    return [
        f"Samples of size n = {n}",
        f"  SE Mean from Central Limit Theorem for n = {n}: {result.clt_se_mean:.2f}",
        f"  SE Mean from Bootstrap Samples: {result.se_mean:.2f}",
        f"  SE Median from Bootstrap Samples: {result.se_median:.2f}",
    ]


class MemoryTracker:
    """Tracks bytes allocated between start() and stop()"""

    def __init__(self):
        self._started_here = False
        self._before = 0

    def start(self) -> None:
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            self._started_here = True
        self._before = tracemalloc.get_traced_memory()[0]

    def stop(self) -> int:
        """Return bytes allocated since start() (never negative)"""
        current = tracemalloc.get_traced_memory()[0]
        if self._started_here:
            tracemalloc.stop()
            self._started_here = False
        return max(0, current - self._before)
