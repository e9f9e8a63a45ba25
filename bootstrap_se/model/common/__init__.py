"""
Common statistic estimators and result models
"""

from .estimators import mean, median, sample_standard_error
from .models import BootstrapSEResult, SampleSizeResult

__all__ = [
    "mean",
    "median",
    "sample_standard_error",
    "BootstrapSEResult",
    "SampleSizeResult",
]
