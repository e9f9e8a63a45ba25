"""
Model estimators package

This package contains the resampling estimators:
- common: Statistic estimators and result models
- bootstrap: Resampler and bootstrap standard error engine
- clt: Central Limit Theorem cross-check
"""

# Common utilities
from .common import (
    mean,
    median,
    sample_standard_error,
    BootstrapSEResult,
    SampleSizeResult,
)

# Bootstrap methods
from .bootstrap import resample, StandardBootstrap, bootstrap

# CLT methods
from .clt import CLTEstimator, empirical_clt, theoretical_clt_se

__all__ = [
    # Common
    "mean",
    "median",
    "sample_standard_error",
    "BootstrapSEResult",
    "SampleSizeResult",
    # Bootstrap
    "resample",
    "StandardBootstrap",
    "bootstrap",
    # CLT
    "CLTEstimator",
    "empirical_clt",
    "theoretical_clt_se",
]
