"""
Experiment settings and parameter management

This module centrally manages parameters used in the standard error
experiment, allowing users to easily change settings.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any, Optional

from ..errors import InvalidParameterError


@dataclass
class Config:
    """Unified configuration class"""

    # === Population Settings ===
    population_size: int = 10000
    population_mean: float = 100.0
    population_std: float = 10.0
    random_seed: int = 42

    # === Resampling Settings ===
    n_bootstrap: int = 100  # Bootstrap resamples per sample size
    sample_sizes: tuple = (25, 100, 225, 400)
    n_clt_samples: int = 1000  # Fresh samples drawn for the empirical CLT SE
    n_jobs: int = 1  # 1 runs iterations sequentially

    # === Output Settings ===
    verbose: bool = True  # Whether to output logs
    output_dir: str = "results"
    log_file: str = "bootstrap.log"
    save_plots: bool = True

    # === Visualization settings ===
    figsize: tuple = (10, 6)
    dpi: int = 300

    def __post_init__(self):
        """Validate counts and distribution parameters"""
        self.sample_sizes = tuple(int(n) for n in self.sample_sizes)
        self.validate()

    def validate(self) -> None:
        """Raise InvalidParameterError for out-of-range settings"""
        if self.population_size < 1:
            raise InvalidParameterError(
                f"population_size must be positive, got {self.population_size}"
            )
        if self.population_std < 0:
            raise InvalidParameterError(
                f"population_std must be non-negative, got {self.population_std}"
            )
        # Standard errors need at least 2 resampled statistics
        if self.n_bootstrap < 2:
            raise InvalidParameterError(
                f"n_bootstrap must be at least 2, got {self.n_bootstrap}"
            )
        if self.n_clt_samples < 2:
            raise InvalidParameterError(
                f"n_clt_samples must be at least 2, got {self.n_clt_samples}"
            )
        if not self.sample_sizes:
            raise InvalidParameterError("sample_sizes must not be empty")
        for n in self.sample_sizes:
            if n < 1:
                raise InvalidParameterError(
                    f"sample sizes must be positive, got {n}"
                )
        if self.n_jobs == 0:
            raise InvalidParameterError("n_jobs must not be 0")

    def to_dict(self) -> Dict[str, Any]:
        """Dictionary of dataclass fields"""
        return {field.name: getattr(self, field.name) for field in fields(self)}


# Preset definitions (overrides applied on top of the defaults)
CONFIG_PRESETS = {
    "default": {},
    "quick": {
        "population_size": 1000,
        "n_bootstrap": 20,
        "n_clt_samples": 100,
    },
    "precise": {
        "n_bootstrap": 1000,
        "n_clt_samples": 5000,
    },
}


def get_config(
    config_name: str = "default", overrides: Optional[Dict[str, Any]] = None
) -> Config:
    """
    Return configuration based on configuration name (with override functionality)

    Args:
        config_name: Base configuration name ("default", "quick", "precise")
            - "default": Population of 10000, 100 resamples, n = 25/100/225/400
            - "quick": Small counts for smoke runs
            - "precise": More resamples for lower Monte Carlo noise
        overrides: Dictionary of settings to override

    Returns:
        Configuration object

    Raises:
        ValueError: If config_name is unknown
        InvalidParameterError: If the resulting settings are invalid
    """
    if config_name not in CONFIG_PRESETS:
        raise ValueError(
            f"Unknown config name '{config_name}', "
            f"expected one of {sorted(CONFIG_PRESETS)}"
        )

    settings = dict(CONFIG_PRESETS[config_name])
    known = {field.name for field in fields(Config)}

    # Apply override processing
    if overrides:
        for key, value in overrides.items():
            if key in known:
                settings[key] = value
            else:
                print(f"Warning: Unknown config key '{key}' - skipping")

    return Config(**settings)
