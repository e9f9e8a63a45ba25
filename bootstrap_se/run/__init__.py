"""
Execution module

Provides execution functionality for the standard error experiment.
"""

from .common import (
    run_sample_size,
    format_sample_size_report,
    distribution_sd,
    MemoryTracker,
)
from .experiment import run_experiment, run_experiment_from_config
from .log import setup_run_logger, close_run_logger

__all__ = [
    "run_sample_size",
    "format_sample_size_report",
    "distribution_sd",
    "MemoryTracker",
    "run_experiment",
    "run_experiment_from_config",
    "setup_run_logger",
    "close_run_logger",
]
