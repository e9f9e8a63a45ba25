"""
Common functions module

Provides common processing such as setting display.
"""

from typing import Optional
from .config import Config, get_config


def print_config_summary(config: Optional[Config] = None) -> None:
    """Display configuration summary"""
    if config is None:
        config = get_config("default")

    print("=== Configuration Summary ===")
    print(f"Population Size: {config.population_size}")
    print(f"Population Mean: {config.population_mean}")
    print(f"Population Std: {config.population_std}")
    print(f"Bootstrap Samples: {config.n_bootstrap}")
    print(f"Sample Sizes: {list(config.sample_sizes)}")
    print(f"CLT Samples: {config.n_clt_samples}")
    print(f"Random Seed: {config.random_seed}")
    print(f"Parallel Jobs: {config.n_jobs}")
    print("=============================")
