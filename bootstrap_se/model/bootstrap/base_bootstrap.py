"""
Base Bootstrap Class

This module provides a base class shared by the bootstrap engine and the
CLT estimator: per-iteration generators, the (optionally parallel) loop,
and standard error calculation over statistic distributions.
"""

import numpy as np
from typing import Dict, List, Optional, Any, Callable
from joblib import Parallel, delayed

from ...errors import InvalidParameterError
from ...settings import Config
from ..common.estimators import sample_standard_error


class BaseBootstrap:
    """Base class for bootstrap

    Provides common parallel execution and standard error calculation logic.
    Holds no state across calls apart from the Config.
    """

    def __init__(self, config: Optional[Config] = None):
        """Initialize BaseBootstrap

        Args:
            config: Config object (uses default Config() if None)
        """
        if config is None:
            config = Config()
        self.config = config

    def _resolve_rng(
        self,
        random_seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> np.random.Generator:
        """Return rng if given, else a generator seeded from random_seed or config"""
        if rng is not None:
            return rng
        if random_seed is None:
            random_seed = self.config.random_seed
        return np.random.default_rng(random_seed)

    def _spawn_iteration_generators(
        self, rng: np.random.Generator, n_iterations: int
    ) -> List[np.random.Generator]:
        """Spawn one independent child generator per iteration

        Spawning all generators up front makes results independent of
        execution order, so sequential and parallel runs agree. Children
        come from distinct SeedSequence branches, so no two iterations
        share a stream.

        Args:
            rng: Parent random generator
            n_iterations: Number of iterations

        Returns:
            List of generators, one per iteration
        """
        return rng.spawn(n_iterations)

    def _run_iterations(
        self,
        iteration_func: Callable,
        iteration_args: List[tuple],
        n_jobs: Optional[int] = None,
    ) -> List[Any]:
        """Execute iterations sequentially or in parallel

        Args:
            iteration_func: Function to execute each iteration
            iteration_args: List of arguments to pass to each iteration
            n_jobs: Number of jobs (uses config.n_jobs if None, 1 is sequential)

        Returns:
            List of iteration results, in iteration order
        """
        if n_jobs is None:
            n_jobs = self.config.n_jobs

        if n_jobs == 1:
            return [iteration_func(*args) for args in iteration_args]

        # Threading backend: iterations only read the shared population
        return Parallel(n_jobs=n_jobs, backend="threading")(
            delayed(iteration_func)(*args) for args in iteration_args
        )

    def _compute_standard_errors(
        self, distributions: Dict[str, np.ndarray], se_prefix: str = "se_"
    ) -> Dict[str, float]:
        """Calculate standard errors from statistic distributions

        Args:
            distributions: Mapping of statistic name to its distribution
            se_prefix: Prefix added to result keys (default: "se_")

        Returns:
            Dictionary of standard errors

        Raises:
            InsufficientDataError: If a distribution has fewer than 2 values
        """
        return {
            f"{se_prefix}{name}": sample_standard_error(values)
            for name, values in distributions.items()
        }

    @staticmethod
    def _check_count(name: str, value: int) -> None:
        if value < 1:
            raise InvalidParameterError(f"{name} must be positive, got {value}")
